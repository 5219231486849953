"""
Shared pytest fixtures for the Rooming List harness test suite.

This module contains fixtures that are shared across all test modules:
the demo application, its database and test data factories.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Database setup/teardown
"""

import os
import pytest
from datetime import date, timedelta
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app, db
from app.models import Booking, RoomingList, RoomingListStatus


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Creates all tables before the test and drops them afterwards so no
    rooming list leaks between tests.

    Yields:
        SQLAlchemy database handle.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rooming_list_factory(db_session):
    """
    Factory fixture for creating RoomingList instances with bookings.

    Example:
        def test_something(rooming_list_factory):
            rooming_list = rooming_list_factory(rfp_name="My RFP", bookings=2)
            assert rooming_list.id is not None
    """

    def _create_rooming_list(
        rfp_name: str | None = None,
        event_name: str = "Test Festival",
        agreement_type: str = "leisure",
        cut_off_date: date | None = None,
        status: str = RoomingListStatus.CLOSED.value,
        bookings: int = 0,
    ) -> RoomingList:
        rooming_list = RoomingList(
            rfp_name=rfp_name or fake.catch_phrase(),
            event_name=event_name,
            agreement_type=agreement_type,
            cut_off_date=cut_off_date or fake.date_between(start_date="+1d", end_date="+90d"),
            status=status,
        )
        for _ in range(bookings):
            check_in = rooming_list.cut_off_date + timedelta(days=fake.random_int(1, 30))
            rooming_list.bookings.append(Booking(
                guest_name=fake.name(),
                guest_phone=fake.phone_number(),
                hotel_id=fake.random_int(1, 50),
                check_in=check_in,
                check_out=check_in + timedelta(days=fake.random_int(1, 5)),
            ))
        db_session.session.add(rooming_list)
        db_session.session.commit()
        return rooming_list

    return _create_rooming_list


@pytest.fixture
def mixed_rooming_lists(rooming_list_factory) -> list[RoomingList]:
    """
    Create rooming lists with every status, inserted out of name order.

    Returns:
        List of RoomingList instances in insertion order.
    """
    return [
        rooming_list_factory(rfp_name="Charlie Crew", status=RoomingListStatus.ACTIVE.value, bookings=2),
        rooming_list_factory(rfp_name="Alpha Artists", status=RoomingListStatus.CLOSED.value, bookings=1),
        rooming_list_factory(rfp_name="Bravo Backstage", status=RoomingListStatus.CANCELLED.value),
        rooming_list_factory(
            rfp_name="Delta Dancers",
            status=RoomingListStatus.CLOSED.value,
            cut_off_date=date.today() - timedelta(days=10),
            bookings=3,
        ),
    ]
