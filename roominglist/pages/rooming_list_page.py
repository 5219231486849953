"""
Rooming List Page Object.

This page object encapsulates all interactions with the rooming list
page: searching, reading event cards, opening their bookings, scrolling
event groups horizontally and reaching the status filter.

Entries are returned in the order the page renders them. The page is
expected to render the server's sort order, so nothing here re-sorts.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from roominglist.config import HarnessConfig
from roominglist.errors import ExtractionMismatch
from roominglist.models import EntrySummary, ScrollResult, Status
from roominglist.pages.base_page import BasePage
from roominglist.pages.bookings_modal import BookingsModal
from roominglist.pages.filter_modal import FilterModal
from roominglist.resolver import ElementResolver, Handle
from roominglist.text import clean, parse_count

logger = logging.getLogger(__name__)

# Content narrower than its viewport by less than this is not scrollable
SCROLL_TOLERANCE_PX = 5


class RoomingListPage(BasePage):
    """
    Page object for the rooming list page (home page).

    Provides methods for:
    - Searching and reading the visible event cards
    - Opening an event's bookings modal
    - Scrolling event groups horizontally
    - Opening the status filter dropdown
    """

    URL_PATH = "/"

    def __init__(
        self,
        page: Page,
        base_url: str,
        resolver: ElementResolver | None = None,
        config: type[HarnessConfig] = HarnessConfig,
    ):
        """
        Initialize RoomingListPage.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            resolver: Resolver to share; a new one is built when omitted.
            config: Harness configuration class.
        """
        super().__init__(page, base_url, resolver, config)
        self.filter_modal = FilterModal(page, base_url, self.resolver)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "RoomingListPage":
        """
        Navigate to the rooming list and wait for its first render.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        self.wait_for_page_load()
        self.resolver.wait_until(
            lambda: bool(self.visible_entries()) or self.is_no_results_visible(),
            "event-card",
            "initial render",
            timeout_ms=self.config.ACTION_TIMEOUT_MS,
        )
        return self

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def page_title(self) -> Handle:
        return self.resolver.locate("page-title")

    @property
    def search_input(self) -> Handle:
        return self.resolver.locate("search-input")

    @property
    def filters_button(self) -> Handle:
        return self.resolver.locate("filters-button")

    @property
    def no_results_message(self) -> Handle:
        return self.resolver.locate("no-results")

    @property
    def event_cards(self) -> Handle:
        return self.resolver.locate("event-card")

    def entry_named(self, name: str) -> Handle:
        """
        Handle for the first card whose name contains ``name``.

        Args:
            name: Event name, with or without its bracket wrapping.
        """
        handle = self.resolver.locate("event-card", has_text=self.clean_event_name(name))
        return Handle(handle.role, handle.locator.first)

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(self, text: str) -> "RoomingListPage":
        """
        Type into the search field and wait for the list to settle.

        The list is settled once the rendered names stop changing and the
        "no results" message is shown exactly when no card is rendered.

        Returns:
            Self for method chaining.

        Raises:
            ElementNotReady: The search field is not usable.
            StateTransitionTimeout: The list did not settle.
        """
        logger.info("Searching for %r", text)
        field = self.search_input
        self.resolver.fill(field, text)
        self.resolver.wait_until(
            lambda: self.resolver.input_value(field) == text, field.role, "search"
        )
        self.resolver.await_stable(self._list_signature, "event-card", f"search {text!r}")
        self.resolver.wait_until(
            lambda: self.is_no_results_visible() == (not self.visible_entries()),
            "no-results",
            f"search {text!r}",
        )
        return self

    def search_value(self) -> str:
        return self.resolver.input_value(self.search_input)

    def is_no_results_visible(self) -> bool:
        return self.resolver.is_visible(self.no_results_message)

    def _list_signature(self) -> tuple:
        names = self.resolver.locate("event-name").locator.all_text_contents()
        return tuple(names), self.is_no_results_visible()

    # -------------------------------------------------------------------------
    # Entries
    # -------------------------------------------------------------------------

    def visible_entries(self) -> list[Handle]:
        """Handles for the currently visible event cards, in rendered order."""
        return [card for card in self.resolver.find("event-card") if self.resolver.is_visible(card)]

    def display_name_of(self, entry: Handle) -> str:
        raw = self.resolver.text_of(self.resolver.locate("event-name", within=entry))
        return self.clean_event_name(raw)

    def displayed_names(self) -> list[str]:
        """Display names of all visible entries, in rendered order."""
        return [self.display_name_of(entry) for entry in self.visible_entries()]

    def status_of(self, entry: Handle) -> Status:
        """
        Read an entry's status.

        Raises:
            ExtractionMismatch: The card shows no status, or an unknown one.
        """
        text = self.resolver.attribute_or_child_text(entry, "event-status")
        try:
            return Status.parse(text)
        except ValueError as exc:
            raise ExtractionMismatch(
                f"Card {self.display_name_of(entry)!r} has unreadable status {text!r}"
            ) from exc

    def booking_count_of(self, entry: Handle) -> int:
        """Number shown in the "View Bookings (N)" label; 0 without a count."""
        return parse_count(self.resolver.text_of(self.view_bookings_button(entry)))

    def view_bookings_button(self, entry: Handle) -> Handle:
        return self.resolver.locate("view-bookings", within=entry)

    def summary_of(self, entry: Handle) -> EntrySummary:
        """Read every summary field of one card."""
        return EntrySummary(
            display_name=self.display_name_of(entry),
            status=self.status_of(entry),
            cutoff_month=self._child_text(entry, "cutoff-month"),
            cutoff_day=self._child_text(entry, "cutoff-day"),
            agreement_type=self._child_text(entry, "agreement-type"),
            booking_count=self.booking_count_of(entry),
        )

    def _child_text(self, entry: Handle, role: str) -> str:
        return (self.resolver.text_of(self.resolver.locate(role, within=entry)) or "").strip()

    # -------------------------------------------------------------------------
    # Bookings
    # -------------------------------------------------------------------------

    def open_detail(self, entry: Handle) -> BookingsModal:
        """
        Open the bookings modal of an entry.

        Returns:
            The visible bookings modal.

        Raises:
            ElementNotReady: The button or the modal never became ready.
        """
        logger.info("Opening bookings of %r", self.display_name_of(entry))
        self.resolver.click(self.view_bookings_button(entry))

        modal = BookingsModal(self.page, self.base_url, self.resolver)
        self.resolver.await_visible(modal.container, "open bookings")
        return modal

    # -------------------------------------------------------------------------
    # Event Groups
    # -------------------------------------------------------------------------

    def event_groups(self) -> list[Handle]:
        return [group for group in self.resolver.find("event-group") if self.resolver.is_visible(group)]

    def group_name_of(self, group: Handle) -> str:
        return clean(self.resolver.text_of(self.resolver.locate("group-name", within=group)))

    def separators_of(self, group: Handle) -> list[Handle]:
        return self.resolver.find("group-separator", within=group)

    def entries_in(self, group: Handle) -> list[Handle]:
        return [card for card in self.resolver.find("event-card", within=group) if self.resolver.is_visible(card)]

    def scroll_container_of(self, group: Handle) -> Handle:
        return self.resolver.locate("scroll-container", within=group)

    def scroll_offset(self, group: Handle) -> float:
        return self.resolver.evaluate(self.scroll_container_of(group), "node => node.scrollLeft")

    def can_scroll(self, group: Handle) -> bool:
        """Whether the group's cards are wider than their viewport."""
        scroll_width, client_width = self.resolver.evaluate(
            self.scroll_container_of(group), "node => [node.scrollWidth, node.clientWidth]"
        )
        return scroll_width > client_width + SCROLL_TOLERANCE_PX

    def scroll_next(self, group: Handle) -> ScrollResult:
        """
        Click the group's "next" control and wait for scrolling to settle.

        When the content is not wider than its viewport this is a no-op
        that reports an unchanged offset.

        Returns:
            Offsets before and after the scroll.
        """
        before = self.scroll_offset(group)
        if not self.can_scroll(group):
            logger.info("Group %r is not scrollable", self.group_name_of(group))
            return ScrollResult(before, before)

        self.resolver.click(self.resolver.locate("scroll-next", within=group))
        after = self.resolver.await_stable(
            lambda: self.scroll_offset(group), "scroll-container", "scroll next"
        )
        return ScrollResult(before, after)

    # -------------------------------------------------------------------------
    # Filters
    # -------------------------------------------------------------------------

    def open_filters(self) -> FilterModal:
        """Open the status filter dropdown."""
        return self.filter_modal.open()
