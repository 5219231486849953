"""
Bookings Modal Page Object.

The modal opened by an event card's "View Bookings" button. It lists the
bookings of one rooming list; each booking shows the guest name and a
block of labelled fields.

State machine: Hidden -> Visible on open, Visible -> Hidden on close.
Reading bookings while the modal is hidden is a usage error.
"""

from __future__ import annotations

import logging

from roominglist.errors import PreconditionViolated
from roominglist.extract import EMPTY_VALUE, LabeledText, extract_labeled_fields
from roominglist.models import Booking
from roominglist.pages.base_page import BasePage
from roominglist.resolver import Handle
from roominglist.text import clean

logger = logging.getLogger(__name__)

BOOKING_FIELD_LABELS = ("Phone", "Hotel ID", "Check-in", "Check-out")


class BookingsModal(BasePage):
    """Page object for the bookings detail modal."""

    @property
    def container(self) -> Handle:
        return self.resolver.locate("bookings-modal")

    @property
    def close_button(self) -> Handle:
        return self.resolver.locate("bookings-close", within=self.container)

    def is_visible(self) -> bool:
        return self.resolver.is_visible(self.container)

    def booking_records(self) -> list[Handle]:
        """Handles for the bookings currently listed, in display order."""
        self._require_visible("list bookings")
        return self.resolver.find("booking-item", within=self.container)

    def labeled_blocks(self, booking: Handle) -> list[LabeledText]:
        """Capture label and full text of every field block of a booking."""
        blocks = []
        for field in self.resolver.find("booking-field", within=booking):
            label = self.resolver.locate("booking-field-label", within=field)
            blocks.append(LabeledText(self.resolver.text_of(label), self.resolver.text_of(field)))
        return blocks

    def fields_of(self, booking: Handle) -> Booking:
        """
        Read one booking.

        Returns:
            Booking whose fields hold EMPTY_VALUE where nothing was rendered.

        Raises:
            PreconditionViolated: The modal is hidden.
            ExtractionMismatch: The booking renders an unexpected label.
        """
        self._require_visible("read booking fields")
        person = clean(self.resolver.text_of(self.resolver.locate("booking-person", within=booking)))
        fields = extract_labeled_fields(self.labeled_blocks(booking), BOOKING_FIELD_LABELS)

        return Booking(
            person_name=person or EMPTY_VALUE,
            phone=fields["Phone"],
            hotel_id=fields["Hotel ID"],
            check_in=fields["Check-in"],
            check_out=fields["Check-out"],
        )

    def all_bookings(self) -> list[Booking]:
        return [self.fields_of(booking) for booking in self.booking_records()]

    def close(self) -> None:
        """
        Click the close control and wait for the modal to disappear.

        Raises:
            PreconditionViolated: The modal is already hidden.
            StateTransitionTimeout: The modal did not close.
        """
        self._require_visible("close bookings")
        self.resolver.click(self.close_button)
        self.resolver.await_hidden(self.container, "close bookings")
        logger.info("Closed bookings modal")

    def _require_visible(self, action: str) -> None:
        if not self.is_visible():
            raise PreconditionViolated(f"Cannot {action}: bookings modal is hidden")
