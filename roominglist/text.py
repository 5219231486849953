"""Normalization of raw text captured from the rendered page."""

from __future__ import annotations

import re

_COUNT_PATTERN = re.compile(r"\((\d+)\)")


def clean(raw: str | None) -> str:
    """
    Strip bracket wrapping and surrounding whitespace from a captured name.

    ``"[ACL Headliner Suites]"`` becomes ``"ACL Headliner Suites"``. Only the
    outermost leading ``[`` and trailing ``]`` are removed on each pass;
    brackets inside the name are kept. Passes repeat until nothing changes,
    so the result never starts with ``[`` or ends with ``]`` and cleaning
    twice gives the same value as cleaning once. Nested wrapping is
    therefore removed completely: ``"[[Double]]"`` becomes ``"Double"``,
    not ``"[Double]"``.

    Args:
        raw: Text as captured from the page, or None.

    Returns:
        The canonical display string ("" for None).
    """
    if raw is None:
        return ""

    value = raw.strip()
    while True:
        stripped = value
        if stripped.startswith("["):
            stripped = stripped[1:]
        if stripped.endswith("]"):
            stripped = stripped[:-1]
        stripped = stripped.strip()
        if stripped == value:
            return value
        value = stripped


def parse_count(label: str | None) -> int:
    """Return N from a control label ending in "(N)", or 0 when absent."""
    if not label:
        return 0
    match = _COUNT_PATTERN.search(label)
    return int(match.group(1)) if match else 0
