"""
Demo data for the Rooming List application.

Two events with a mix of statuses. RFP names start with their event's
prefix, so sorting by RFP name keeps each event's cards together.
"""

import logging
from datetime import date, timedelta

from sqlalchemy import func, select

from app import db
from app.models import Booking, RoomingList, RoomingListStatus

logger = logging.getLogger(__name__)

ACTIVE = RoomingListStatus.ACTIVE.value
CLOSED = RoomingListStatus.CLOSED.value
CANCELLED = RoomingListStatus.CANCELLED.value

# (event, rfp name, agreement type, cut-off date, status, number of bookings)
DEMO_ROOMING_LISTS = [
    ("ACL Festival", "ACL Headliner Suites", "artist", date(2025, 9, 15), CLOSED, 3),
    ("ACL Festival", "ACL Production Crew", "staff", date(2025, 9, 10), ACTIVE, 2),
    ("ACL Festival", "ACL Security Personnel", "staff", date(2025, 9, 12), CLOSED, 4),
    ("ACL Festival", "ACL Vendor Housing", "leisure", date(2025, 9, 20), CANCELLED, 1),
    ("Ultra Miami", "Ultra Artist Management", "artist", date(2026, 2, 28), CLOSED, 2),
    ("Ultra Miami", "Ultra Crew Housing", "staff", date(2026, 3, 1), CANCELLED, 3),
    ("Ultra Miami", "Ultra DJ Accommodations", "artist", date(2026, 2, 20), ACTIVE, 2),
    ("Ultra Miami", "Ultra Hospitality Team", "staff", date(2026, 2, 25), CLOSED, 1),
    ("Ultra Miami", "Ultra Media Village", "leisure", date(2026, 3, 5), CLOSED, 0),
    ("Ultra Miami", "Ultra Stage Crew", "staff", date(2026, 3, 2), CLOSED, 3),
    ("Ultra Miami", "Ultra Talent Relations", "artist", date(2026, 2, 27), CLOSED, 2),
    ("Ultra Miami", "Ultra VIP Experience", "leisure", date(2026, 3, 8), CLOSED, 4),
]

GUEST_NAMES = [
    "Avery Collins", "Jordan Reyes", "Morgan Patel", "Riley Chen",
    "Casey Nguyen", "Taylor Brooks", "Jamie Ortiz", "Quinn Foster",
]


def _demo_bookings(cut_off_date: date, count: int, offset: int) -> list[Booking]:
    """Build ``count`` bookings staying three nights from three weeks after cut-off."""
    bookings = []
    for index in range(count):
        sequence = offset + index
        check_in = cut_off_date + timedelta(days=21 + index)
        bookings.append(Booking(
            guest_name=GUEST_NAMES[sequence % len(GUEST_NAMES)],
            guest_phone=f"+1 555-01{sequence % 100:02d}",
            hotel_id=1 + sequence % 3,
            check_in=check_in,
            check_out=check_in + timedelta(days=3),
        ))
    return bookings


def seed_demo_data() -> int:
    """
    Load the demo rooming lists into an empty database.

    Must run inside an application context.

    Returns:
        Number of rooming lists created (0 when data already exists).
    """
    existing = db.session.scalar(select(func.count()).select_from(RoomingList))
    if existing:
        logger.info("Skipping demo data: %s rooming lists already present", existing)
        return 0

    offset = 0
    for event, rfp_name, agreement_type, cut_off_date, status, booking_count in DEMO_ROOMING_LISTS:
        rooming_list = RoomingList(
            event_name=event,
            rfp_name=rfp_name,
            agreement_type=agreement_type,
            cut_off_date=cut_off_date,
            status=status,
        )
        rooming_list.bookings = _demo_bookings(cut_off_date, booking_count, offset)
        offset += booking_count
        db.session.add(rooming_list)

    db.session.commit()
    logger.info("Seeded %s demo rooming lists", len(DEMO_ROOMING_LISTS))
    return len(DEMO_ROOMING_LISTS)
