"""
Database models for the Rooming List demo application.

A rooming list is one request for proposal (RFP) issued for an event;
its bookings are the guests housed under it.
"""

from datetime import date
from enum import Enum
from typing import Any

from app import db


class RoomingListStatus(str, Enum):
    """Enumeration of possible rooming list statuses."""

    ACTIVE = "active"
    CLOSED = "closed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        """Status as displayed on the event card."""
        return self.value.capitalize()


class RoomingList(db.Model):
    """
    Rooming list for one RFP of an event.

    Attributes:
        id: Unique identifier.
        event_name: Event the rooming list belongs to; cards are grouped by it.
        rfp_name: Name of the request for proposal.
        agreement_type: Contract type (leisure, staff, artist).
        cut_off_date: Last day changes are accepted.
        status: Current status (active, closed, cancelled).
        bookings: Bookings housed under this rooming list.
    """

    __tablename__ = "rooming_lists"

    id: int = db.Column(db.Integer, primary_key=True)
    event_name: str = db.Column(db.String(200), nullable=False)
    rfp_name: str = db.Column(db.String(200), nullable=False)
    agreement_type: str = db.Column(db.String(50), nullable=False)
    cut_off_date: date = db.Column(db.Date, nullable=False)
    status: str = db.Column(
        db.String(20),
        nullable=False,
        default=RoomingListStatus.CLOSED.value
    )
    bookings = db.relationship(
        "Booking",
        back_populates="rooming_list",
        cascade="all, delete-orphan",
        order_by="Booking.id",
    )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the rooming list to its API representation.

        Returns:
            Dictionary with camelCase keys, as served by the listing API.
        """
        return {
            "roomingListId": self.id,
            "eventName": self.event_name,
            "rfpName": self.rfp_name,
            "agreementType": self.agreement_type,
            "cutOffDate": self.cut_off_date.isoformat(),
            "status": self.status,
            "bookingCount": len(self.bookings),
        }

    def __repr__(self) -> str:
        """Return string representation of the rooming list."""
        return f"<RoomingList {self.id}: {self.rfp_name}>"


class Booking(db.Model):
    """
    A guest booking under a rooming list.

    Attributes:
        id: Unique identifier.
        rooming_list_id: Owning rooming list.
        guest_name: Guest's full name.
        guest_phone: Guest's phone number.
        hotel_id: Identifier of the hotel.
        check_in: Arrival date.
        check_out: Departure date.
    """

    __tablename__ = "bookings"

    id: int = db.Column(db.Integer, primary_key=True)
    rooming_list_id: int = db.Column(
        db.Integer, db.ForeignKey("rooming_lists.id"), nullable=False
    )
    guest_name: str = db.Column(db.String(200), nullable=False)
    guest_phone: str = db.Column(db.String(50), nullable=False)
    hotel_id: int = db.Column(db.Integer, nullable=False)
    check_in: date = db.Column(db.Date, nullable=False)
    check_out: date = db.Column(db.Date, nullable=False)

    rooming_list = db.relationship("RoomingList", back_populates="bookings")

    def to_dict(self) -> dict[str, Any]:
        """Convert the booking to its API representation."""
        return {
            "bookingId": self.id,
            "roomingListId": self.rooming_list_id,
            "guestName": self.guest_name,
            "guestPhoneNumber": self.guest_phone,
            "hotelId": self.hotel_id,
            "checkInDate": self.check_in.isoformat(),
            "checkOutDate": self.check_out.isoformat(),
        }

    def __repr__(self) -> str:
        return f"<Booking {self.id}: {self.guest_name}>"
