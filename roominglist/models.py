"""
Value types read from the rooming list page.

Entries and bookings are read-only projections of what the page renders;
they are rebuilt on every query. ``FilterState`` is the only mutable
bookkeeping the harness keeps, and it is used to decide which action to
take next, never as a substitute for reading the page.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from roominglist.errors import PreconditionViolated


class Status(str, Enum):
    """Status of a rooming list; also the options of the filter surface."""

    ACTIVE = "Active"
    CLOSED = "Closed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, text: str | None) -> "Status":
        """
        Parse rendered status text.

        Raises:
            ValueError: If the text is not one of the known statuses.
        """
        normalized = (text or "").strip().casefold()
        for status in cls:
            if status.value.casefold() == normalized:
                return status
        raise ValueError(f"Unknown status: {text!r}")


DEFAULT_SELECTION: frozenset[Status] = frozenset({Status.CLOSED})


@dataclass(frozen=True)
class EntrySummary:
    """Summary fields shown on one event card."""

    display_name: str
    status: Status
    cutoff_month: str
    cutoff_day: str
    agreement_type: str
    booking_count: int


@dataclass(frozen=True)
class Booking:
    """One booking listed in an entry's detail modal."""

    person_name: str
    phone: str
    hotel_id: str
    check_in: str
    check_out: str


@dataclass(frozen=True)
class ScrollResult:
    """Horizontal scroll offsets before and after a scroll action."""

    before: float
    after: float

    @property
    def moved(self) -> bool:
        return self.after > self.before


class FilterState:
    """
    Bookkeeping for the filter surface.

    Closed(committed) --open()--> Open(pending=committed, committed)
    Open --toggle(option)--> Open with option flipped in pending
    Open --save()--> Closed(committed=pending)
    Open --dismiss()--> Closed(committed), pending discarded
    """

    def __init__(self, committed: frozenset[Status] = DEFAULT_SELECTION):
        self._committed = frozenset(committed)
        self._pending: set[Status] | None = None

    @property
    def is_open(self) -> bool:
        return self._pending is not None

    @property
    def committed(self) -> frozenset[Status]:
        return self._committed

    @property
    def pending(self) -> frozenset[Status]:
        self._require_open("read pending selection")
        return frozenset(self._pending)

    def open(self) -> None:
        if self.is_open:
            raise PreconditionViolated("Filter surface is already open")
        self._pending = set(self._committed)

    def toggle(self, option: Status) -> bool:
        """Flip ``option`` in the pending selection; return its new membership."""
        self._require_open(f"toggle {option.value}")
        if option in self._pending:
            self._pending.remove(option)
            return False
        self._pending.add(option)
        return True

    def save(self) -> frozenset[Status]:
        self._require_open("save")
        self._committed = frozenset(self._pending)
        self._pending = None
        return self._committed

    def dismiss(self) -> None:
        self._require_open("dismiss")
        self._pending = None

    def _require_open(self, action: str) -> None:
        if self._pending is None:
            raise PreconditionViolated(f"Cannot {action}: filter surface is closed")

    def __repr__(self) -> str:
        names = sorted(status.value for status in self._committed)
        state = "Open" if self.is_open else "Closed"
        return f"<FilterState {state} committed={names}>"
