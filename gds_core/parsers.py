"""Parsers for raw terminal screens returned by the reservation host.

Every screen layout gets its own function. Parsers never raise: a screen
that does not match the expected template yields ``None`` so callers can try
another parser or wait for the host to reach the expected state.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional

from .models import ParseResult, PassengerListEntry

LOGGER = logging.getLogger(__name__)

_NAME_LIST_HEADER = re.compile(r"^\s*(?:SIMILAR\s+)?NAME\s+LIST\b", re.IGNORECASE)
# The status marker sits in the column right before the single blank that
# precedes the date and is separated from the name by at least one blank.
# Rows too short to have that column are active bookings.
_NAME_LIST_ROW = re.compile(
    r"^\s*(?P<id>\d{1,3})\s+"
    r"(?P<last>[A-Z][A-Z' -]*)/(?P<first>[A-Z][A-Z' .-]*?)\s+"
    r"(?:(?P<marker>[ X]) )?(?P<date>\d{2}[A-Z]{3}(?:\d{2})?)\s*$"
)
_BOOKING_IN_USE = re.compile(
    r"\*\*\s*THIS\s+BF\s+IS\s+CURRENTLY\s+IN\s+USE\s*\*\*\s*(?P<pnr>[A-Z0-9]{6})/",
    re.IGNORECASE,
)


def search_passengers_list(text: str) -> Optional[List[PassengerListEntry]]:
    """Parse the name list shown after a ``*-NAME`` search.

    Returns the rows in screen order, or ``None`` when the header is missing
    or no row follows it.
    """

    if not isinstance(text, str):
        return None

    lines = text.splitlines()
    header_index = next(
        (index for index, line in enumerate(lines) if _NAME_LIST_HEADER.match(line)),
        None,
    )
    if header_index is None:
        return None

    entries: List[PassengerListEntry] = []
    for line in lines[header_index + 1:]:
        match = _NAME_LIST_ROW.match(line)
        if not match:
            continue
        entries.append(
            PassengerListEntry(
                id=int(match.group("id")),
                first_name=match.group("first").strip(),
                last_name=match.group("last").strip(),
                is_cancelled=match.group("marker") == "X",
                date=match.group("date"),
            )
        )
    return entries or None


def booking_pnr(text: str) -> Optional[str]:
    """Return the record locator from a "booking in use" screen.

    The code may follow the banner on the next line or on the same line.
    """

    if not isinstance(text, str):
        return None
    match = _BOOKING_IN_USE.search(text)
    if not match:
        return None
    return match.group("pnr").upper()


PARSERS: Dict[str, Callable[[str], object]] = {
    "search_passengers_list": search_passengers_list,
    "booking_pnr": booking_pnr,
}


def parse(name: str, text: str) -> ParseResult:
    """Run the parser registered under ``name``.

    Unknown names raise :class:`KeyError`; a screen that does not match is
    reported through :attr:`ParseResult.found`.
    """

    parser = PARSERS[name]
    result = ParseResult(parser=name, value=parser(text))
    if not result.found:
        LOGGER.debug("Screen did not match %s", name)
    return result


def parse_first(text: str, names: Optional[Iterable[str]] = None) -> ParseResult:
    """Try parsers in order and return the first match."""

    for name in names if names is not None else PARSERS:
        result = parse(name, text)
        if result.found:
            return result
    return ParseResult(parser=None)
