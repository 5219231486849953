"""
Page Object Model (POM) classes for the rooming list UI.

Page objects resolve every element through the shared ElementResolver,
so selectors live only in the role mapping table.
"""

from roominglist.pages.base_page import BasePage
from roominglist.pages.bookings_modal import BOOKING_FIELD_LABELS, BookingsModal
from roominglist.pages.filter_modal import FilterModal
from roominglist.pages.rooming_list_page import RoomingListPage

__all__ = ["BasePage", "BookingsModal", "BOOKING_FIELD_LABELS", "FilterModal", "RoomingListPage"]
