"""
Filter Modal Page Object.

Drives the status filter dropdown: opening it, toggling the Active,
Closed and Cancelled options, and saving or dismissing it.

The rendered check marks are the ground truth. ``FilterState`` only
records what the harness has asked for so that it can decide what to
click next; every toggle is confirmed by reading the check mark back.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from playwright.sync_api import Page

from roominglist.errors import PreconditionViolated
from roominglist.models import DEFAULT_SELECTION, FilterState, Status
from roominglist.pages.base_page import BasePage
from roominglist.resolver import ElementResolver, Handle

logger = logging.getLogger(__name__)


class FilterModal(BasePage):
    """
    Page object for the status filter dropdown.

    Provides methods for:
    - Opening the dropdown from the Filters button
    - Toggling options and reading their rendered check marks
    - Saving or dismissing the pending selection
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        resolver: ElementResolver | None = None,
        state: FilterState | None = None,
    ):
        super().__init__(page, base_url, resolver)
        self.state = state or FilterState(DEFAULT_SELECTION)

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def filters_button(self) -> Handle:
        return self.resolver.locate("filters-button")

    @property
    def container(self) -> Handle:
        return self.resolver.locate("filter-modal")

    @property
    def save_button(self) -> Handle:
        return self.resolver.locate("filter-save", within=self.container)

    def option(self, option: Status) -> Handle:
        """Handle for one filter option row."""
        return self.resolver.locate("filter-option", within=self.container, has_text=option.value)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def is_visible(self) -> bool:
        return self.resolver.is_visible(self.container)

    def is_checked(self, option: Status) -> bool:
        """Whether the option's check mark is rendered."""
        check = self.resolver.locate("filter-option-check", within=self.option(option))
        return self.resolver.is_visible(check)

    def checked_options(self) -> frozenset[Status]:
        """All options whose check mark is rendered."""
        return frozenset(option for option in Status if self.is_checked(option))

    @property
    def applied_selection(self) -> frozenset[Status]:
        """Selection last saved through this page object."""
        return self.state.committed

    def bounding_box(self) -> dict | None:
        return self.container.locator.bounding_box()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def open(self) -> "FilterModal":
        """
        Click the Filters button and wait for the dropdown.

        Returns:
            Self for method chaining.

        Raises:
            PreconditionViolated: The dropdown is already open.
            ElementNotReady: The dropdown did not appear.
        """
        if self.is_visible():
            raise PreconditionViolated("Filter dropdown is already open")
        self._sync_state(visible=False)

        self.resolver.click(self.filters_button)
        self.resolver.await_visible(self.container, "open filters")
        self.state.open()
        logger.info("Opened filters with %s checked", sorted(s.value for s in self.checked_options()))
        return self

    def toggle(self, option: Status) -> "FilterModal":
        """
        Click an option and wait until its check mark reflects the click.

        Raises:
            PreconditionViolated: The dropdown is not open.
            StateTransitionTimeout: The check mark never flipped.
        """
        self._require_visible(f"toggle {option.value}")
        was_checked = self.is_checked(option)

        handle = self.option(option)
        self.resolver.click(handle)
        self.resolver.wait_until(
            lambda: self.is_checked(option) != was_checked,
            handle.role,
            f"toggle {option.value}",
        )
        self.state.toggle(option)
        return self

    def save(self) -> frozenset[Status]:
        """
        Save the pending selection and wait for the dropdown to close.

        Returns:
            The saved selection, as rendered just before saving.

        Raises:
            StateTransitionTimeout: The dropdown did not close.
        """
        self._require_visible("save filters")
        rendered = self.checked_options()

        self.resolver.click(self.save_button)
        self.resolver.await_hidden(self.container, "save filters")
        saved = self.state.save()
        logger.info("Saved filters: %s", sorted(s.value for s in saved))
        return rendered

    def dismiss(self) -> None:
        """
        Close the dropdown with Escape, discarding pending toggles.

        Raises:
            StateTransitionTimeout: The dropdown did not close.
        """
        self._require_visible("dismiss filters")
        self.resolver.press(self.container, "Escape")
        self.resolver.await_hidden(self.container, "dismiss filters")
        self.state.dismiss()
        logger.info("Dismissed filters without saving")

    def apply(self, selection: Iterable[Status]) -> frozenset[Status]:
        """
        Make ``selection`` the applied filter.

        Opens the dropdown when needed, toggles every option whose rendered
        state differs from the target and saves.

        Returns:
            The saved selection.
        """
        target = frozenset(selection)
        if not self.is_visible():
            self.open()

        for option in Status:
            if self.is_checked(option) != (option in target):
                self.toggle(option)

        return self.save()

    def _require_visible(self, action: str) -> None:
        if not self.is_visible():
            raise PreconditionViolated(f"Cannot {action}: filter dropdown is not open")
        self._sync_state(visible=True)

    def _sync_state(self, visible: bool) -> None:
        # The rendered dropdown wins over the bookkeeping
        if self.state.is_open and not visible:
            logger.info("Filter dropdown was closed outside the harness; discarding pending toggles")
            self.state.dismiss()
        elif visible and not self.state.is_open:
            logger.info("Filter dropdown was opened outside the harness")
            self.state.open()
