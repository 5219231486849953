"""
UI tests for the rooming list page.

These tests drive the demo app in a real browser through the page
objects and check the rendered list against the listing API.
"""

import pytest

from roominglist.errors import PreconditionViolated
from roominglist.extract import EMPTY_VALUE
from roominglist.models import DEFAULT_SELECTION, Status

pytestmark = pytest.mark.ui

MONTH_ABBREVIATIONS = {"Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"}


def _group_named(rooming_list_page, name):
    for group in rooming_list_page.event_groups():
        if rooming_list_page.group_name_of(group) == name:
            return group
    pytest.fail(f"No event group named {name!r}")


class TestPageChrome:
    """Tests for the static parts of the page."""

    def test_title_is_displayed(self, rooming_list_page):
        title = rooming_list_page.resolver.text_of(rooming_list_page.page_title)

        assert title == "Rooming List Management: Events"

    def test_search_and_filters_are_visible(self, rooming_list_page):
        assert rooming_list_page.resolver.is_visible(rooming_list_page.search_input)
        assert rooming_list_page.resolver.is_visible(rooming_list_page.filters_button)

    @pytest.mark.parametrize("width,height", [(768, 1024), (375, 667)])
    def test_layout_survives_narrow_viewports(self, rooming_list_page, page, width, height):
        # Act
        page.set_viewport_size({"width": width, "height": height})

        # Assert
        box = rooming_list_page.search_input.locator.bounding_box()
        assert rooming_list_page.resolver.is_visible(rooming_list_page.search_input)
        assert box["x"] >= 0
        assert box["x"] + box["width"] <= width
        assert rooming_list_page.visible_entries()


class TestSearch:
    """Tests for the search field."""

    def test_typing_updates_search_value(self, rooming_list_page):
        rooming_list_page.search("Ultra")

        assert rooming_list_page.search_value() == "Ultra"

    def test_search_narrows_to_matching_entry(self, rooming_list_page):
        # Act
        rooming_list_page.search("ACL Security Personnel")

        # Assert
        entries = rooming_list_page.visible_entries()
        assert len(entries) == 1
        assert rooming_list_page.display_name_of(entries[0]) == "ACL Security Personnel"
        assert rooming_list_page.status_of(entries[0]) is Status.CLOSED

    def test_search_is_case_insensitive(self, rooming_list_page):
        rooming_list_page.search("stage crew")

        assert rooming_list_page.displayed_names() == ["Ultra Stage Crew"]

    def test_no_match_shows_message(self, rooming_list_page):
        # Act
        rooming_list_page.search("zzzzzzzz")

        # Assert
        assert rooming_list_page.visible_entries() == []
        assert rooming_list_page.is_no_results_visible()

    def test_clearing_search_restores_list(self, rooming_list_page):
        # Arrange
        initial = rooming_list_page.displayed_names()
        rooming_list_page.search("zzzzzzzz")

        # Act
        rooming_list_page.search("")

        # Assert
        assert rooming_list_page.displayed_names() == initial
        assert not rooming_list_page.is_no_results_visible()


class TestEntries:
    """Tests for reading event cards."""

    def test_repeated_reads_agree(self, rooming_list_page):
        first = rooming_list_page.displayed_names()
        second = rooming_list_page.displayed_names()

        assert first == second
        assert first

    def test_default_list_shows_closed_entries_only(self, rooming_list_page):
        statuses = {rooming_list_page.status_of(entry) for entry in rooming_list_page.visible_entries()}

        assert statuses == set(DEFAULT_SELECTION)

    def test_names_follow_server_order(self, rooming_list_page, api_client):
        # Arrange
        expected = [
            record["rfpName"]
            for record in api_client.list_rooming_lists(sort_by="rfpName", sort_order="ASC")
            if Status.parse(record["status"]) in rooming_list_page.filter_modal.applied_selection
        ]

        # Act
        displayed = rooming_list_page.displayed_names()

        # Assert
        assert displayed == expected

    def test_summary_fields_are_populated(self, rooming_list_page):
        for entry in rooming_list_page.visible_entries():
            summary = rooming_list_page.summary_of(entry)

            assert summary.display_name
            assert not summary.display_name.startswith("[")
            assert summary.cutoff_month in MONTH_ABBREVIATIONS
            assert summary.cutoff_day.isdigit()
            assert summary.agreement_type
            assert summary.booking_count >= 0

    def test_entry_named_finds_card(self, rooming_list_page):
        entry = rooming_list_page.entry_named("[Ultra VIP Experience]")

        assert rooming_list_page.summary_of(entry).booking_count == 4


class TestBookings:
    """Tests for the bookings modal."""

    def test_modal_lists_as_many_bookings_as_label_shows(self, rooming_list_page):
        # Arrange
        entry = rooming_list_page.entry_named("ACL Headliner Suites")
        expected = rooming_list_page.booking_count_of(entry)

        # Act
        modal = rooming_list_page.open_detail(entry)

        # Assert
        assert expected == 3
        assert len(modal.booking_records()) == expected

    def test_every_entry_lists_as_many_bookings_as_label_shows(self, rooming_list_page):
        # Arrange
        rooming_list_page.filter_modal.apply(set(Status))
        entries = rooming_list_page.visible_entries()
        assert entries

        for entry in entries:
            expected = rooming_list_page.booking_count_of(entry)

            # Act
            modal = rooming_list_page.open_detail(entry)
            records = modal.booking_records()
            bookings = [modal.fields_of(record) for record in records]
            modal.close()

            # Assert
            assert len(records) == expected, rooming_list_page.display_name_of(entry)
            for booking in bookings:
                assert EMPTY_VALUE not in (
                    booking.person_name, booking.phone, booking.hotel_id, booking.check_in, booking.check_out,
                )

    def test_booking_fields_are_read(self, rooming_list_page):
        # Arrange
        entry = rooming_list_page.entry_named("Ultra Stage Crew")

        # Act
        bookings = rooming_list_page.open_detail(entry).all_bookings()

        # Assert
        assert len(bookings) == 3
        for booking in bookings:
            assert EMPTY_VALUE not in (
                booking.person_name, booking.phone, booking.hotel_id, booking.check_in, booking.check_out,
            )
            assert booking.check_in < booking.check_out

    def test_entry_without_bookings_opens_empty_modal(self, rooming_list_page):
        entry = rooming_list_page.entry_named("Ultra Media Village")

        modal = rooming_list_page.open_detail(entry)

        assert rooming_list_page.booking_count_of(entry) == 0
        assert modal.booking_records() == []

    def test_reading_closed_modal_is_rejected(self, rooming_list_page):
        # Arrange
        modal = rooming_list_page.open_detail(rooming_list_page.entry_named("Ultra Talent Relations"))

        # Act
        modal.close()

        # Assert
        assert not modal.is_visible()
        with pytest.raises(PreconditionViolated):
            modal.booking_records()


class TestEventGroups:
    """Tests for event grouping and horizontal scrolling."""

    def test_groups_in_server_order(self, rooming_list_page):
        names = [rooming_list_page.group_name_of(group) for group in rooming_list_page.event_groups()]

        assert names == ["ACL Festival", "Ultra Miami"]

    def test_each_group_has_two_separators(self, rooming_list_page):
        for group in rooming_list_page.event_groups():
            assert len(rooming_list_page.separators_of(group)) == 2

    def test_groups_hold_all_visible_entries(self, rooming_list_page):
        grouped = sum(len(rooming_list_page.entries_in(group)) for group in rooming_list_page.event_groups())

        assert grouped == len(rooming_list_page.visible_entries())

    def test_scroll_next_moves_overflowing_group(self, rooming_list_page):
        # Arrange
        group = _group_named(rooming_list_page, "Ultra Miami")
        assert rooming_list_page.can_scroll(group)

        # Act
        result = rooming_list_page.scroll_next(group)

        # Assert
        assert result.moved
        assert rooming_list_page.scroll_offset(group) == result.after

    def test_scroll_next_on_fitting_group_is_noop(self, rooming_list_page):
        group = _group_named(rooming_list_page, "ACL Festival")

        result = rooming_list_page.scroll_next(group)

        assert not rooming_list_page.can_scroll(group)
        assert not result.moved
