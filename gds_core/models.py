"""Shared data structures produced by parsers and workflows."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union


@dataclass
class PassengerListEntry:
    """One row of a passenger name search screen."""

    id: int
    first_name: str
    last_name: str
    is_cancelled: bool
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "is_cancelled": self.is_cancelled,
            "date": self.date,
        }


@dataclass(frozen=True)
class Price:
    """Amount split from a concatenated token such as ``UAH123``."""

    currency: str
    value: float


@dataclass(frozen=True)
class ParseResult:
    """Outcome of running a named screen parser.

    ``value`` holds the parsed record when the screen matched and ``None``
    otherwise, so callers can branch on ``result.found`` (or the result's
    truthiness) instead of comparing against ``None`` themselves.
    """

    parser: Optional[str]
    value: Any = None

    @property
    def found(self) -> bool:
        return self.value is not None

    def __bool__(self) -> bool:
        return self.found


@dataclass
class BookingSearchResult:
    """Result returned by :func:`gds_core.workflow.search_bookings_by_passenger_name`."""

    type: str
    data: Union[str, List[Dict[str, Any]]]

    def to_dict(self) -> Dict[str, object]:
        return {"type": self.type, "data": self.data}
