"""
Role mapping table.

Every semantic role the page objects use is resolved here and nowhere
else. The default table resolves purely by ``data-testid``; a YAML file
can overlay entries to point the harness at markup without test ids.

Example override file::

    roles:
      search-input:
        css: "input.sc-gjZUHa.fhNaUA"
      event-status:
        css: "[status]"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

STRATEGIES = ("test_id", "css", "text")

BUNDLED_ROLE_MAPS = Path(__file__).resolve().parent / "role_maps"


@dataclass(frozen=True)
class RoleSpec:
    """How to resolve one semantic role."""

    strategy: str
    value: str
    # When set, attribute_or_child_text reads this attribute instead of text
    attribute: str | None = None

    def __post_init__(self):
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy {self.strategy!r}; must be one of {STRATEGIES}"
            )


def _test_id(value: str, attribute: str | None = None) -> RoleSpec:
    return RoleSpec("test_id", value, attribute)


DEFAULT_ROLES: dict[str, RoleSpec] = {
    # Page chrome
    "page-title": _test_id("page-title"),
    "search-input": _test_id("search-input"),
    "filters-button": _test_id("filters-button"),
    "no-results": _test_id("no-results"),
    # Event groups and horizontal scrolling
    "event-group": _test_id("event-group"),
    "group-name": _test_id("group-name"),
    "group-separator": _test_id("group-separator"),
    "scroll-container": _test_id("scroll-container"),
    "scroll-next": _test_id("scroll-next"),
    # Event cards
    "event-card": _test_id("event-card"),
    "event-name": _test_id("event-name"),
    "event-status": _test_id("event-status"),
    "agreement-type": _test_id("agreement-type"),
    "cutoff-date": _test_id("cutoff-date"),
    "cutoff-month": _test_id("cutoff-month"),
    "cutoff-day": _test_id("cutoff-day"),
    "view-bookings": _test_id("view-bookings"),
    # Filter surface
    "filter-modal": _test_id("filter-modal"),
    "filter-option": _test_id("filter-option"),
    "filter-option-check": _test_id("filter-option-check"),
    "filter-save": _test_id("filter-save"),
    # Bookings modal
    "bookings-modal": _test_id("bookings-modal"),
    "bookings-close": _test_id("bookings-close"),
    "booking-item": _test_id("booking-item"),
    "booking-person": _test_id("booking-person"),
    "booking-field": _test_id("booking-field"),
    "booking-field-label": _test_id("booking-field-label"),
}


def parse_role_map(data: dict) -> dict[str, RoleSpec]:
    """
    Build role specs from a parsed role map document.

    Args:
        data: Mapping with a top-level ``roles`` key.

    Returns:
        Dict of role name -> RoleSpec.

    Raises:
        ValueError: If an entry does not name exactly one strategy.
    """
    roles = {}
    for role, entry in (data.get("roles") or {}).items():
        entry = dict(entry or {})
        attribute = entry.pop("attribute", None)
        strategies = [key for key in entry if key in STRATEGIES]
        if len(strategies) != 1 or len(entry) != 1:
            raise ValueError(
                f"Role {role!r} must name exactly one of {STRATEGIES}, got {sorted(entry)}"
            )
        strategy = strategies[0]
        roles[role] = RoleSpec(strategy, str(entry[strategy]), attribute)
    return roles


def load_role_map(path: str | Path | None = None) -> dict[str, RoleSpec]:
    """
    Return the default role table overlaid with the entries of a YAML file.

    Args:
        path: Override file, or None for the default table alone.

    Returns:
        Complete role table.
    """
    roles = dict(DEFAULT_ROLES)
    if path is None:
        return roles

    with open(path, encoding="utf-8") as role_map_file:
        overrides = parse_role_map(yaml.safe_load(role_map_file) or {})

    unknown = sorted(set(overrides) - set(DEFAULT_ROLES))
    if unknown:
        logger.warning("Role map %s defines unused roles: %s", path, unknown)

    logger.info("Loaded %d role overrides from %s", len(overrides), path)
    roles.update(overrides)
    return roles
