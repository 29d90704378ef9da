"""High level orchestration of terminal screens and parameter pipelines."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Protocol

from .errors import ScreenParseError
from .models import BookingSearchResult
from .parsers import booking_pnr, search_passengers_list
from .validators import SEARCH_BOOKINGS_PARAMS

LOGGER = logging.getLogger(__name__)


class Terminal(Protocol):
    def execute_command(self, command: str) -> str:
        ...


def search_bookings_by_passenger_name(terminal: Terminal, params: Dict[str, Any]) -> BookingSearchResult:
    """Search bookings by passenger surname.

    The host either answers with a list of similar names, in which case each
    booking is opened to read its record locator, or jumps straight into the
    single matching booking.
    """

    prepared = SEARCH_BOOKINGS_PARAMS(params)
    first_screen = terminal.execute_command(f"*-{prepared['search_phrase']}")

    entries = search_passengers_list(first_screen)
    if entries is not None:
        data: List[Dict[str, Any]] = []
        for entry in entries:
            screen = terminal.execute_command(f"*{entry.id}")
            pnr = booking_pnr(screen)
            if pnr is None:
                LOGGER.warning("No record locator found for list entry %s", entry.id)
            terminal.execute_command("I")
            data.append({**entry.to_dict(), "pnr": pnr})
        return BookingSearchResult(type="list", data=data)

    pnr = booking_pnr(first_screen)
    if pnr is not None:
        return BookingSearchResult(type="pnr", data=pnr)

    raise ScreenParseError(
        f"Unrecognised screen for passenger search {prepared['search_phrase']!r}",
        screen=first_screen,
    )
