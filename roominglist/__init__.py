"""
Verification harness for the Rooming List UI.

Page objects, the element resolver and the value types they return.
"""

from roominglist.errors import (
    ApiContractError,
    ElementNotFound,
    ElementNotReady,
    ExtractionMismatch,
    HarnessError,
    PreconditionViolated,
    StateTransitionTimeout,
)
from roominglist.extract import EMPTY_VALUE
from roominglist.models import DEFAULT_SELECTION, Booking, EntrySummary, FilterState, ScrollResult, Status
from roominglist.resolver import ElementResolver, Handle
from roominglist.text import clean

__all__ = [
    "ApiContractError",
    "Booking",
    "DEFAULT_SELECTION",
    "EMPTY_VALUE",
    "ElementNotFound",
    "ElementNotReady",
    "ElementResolver",
    "EntrySummary",
    "ExtractionMismatch",
    "FilterState",
    "Handle",
    "HarnessError",
    "PreconditionViolated",
    "ScrollResult",
    "StateTransitionTimeout",
    "Status",
    "clean",
]
