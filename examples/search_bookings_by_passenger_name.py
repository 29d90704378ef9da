"""Search bookings by passenger surname using credentials from GDS_* variables."""
from __future__ import annotations

import logging
import sys

from gds_core import GdsError, TerminalClient, create_config, search_bookings_by_passenger_name
from gds_core.reporter import build_report

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger(__name__)


def main(search_phrase: str) -> int:
    config = create_config()
    try:
        with TerminalClient(config) as terminal:
            result = search_bookings_by_passenger_name(terminal, {"search_phrase": search_phrase})
    except GdsError as exc:
        LOGGER.error("Search failed: %s", exc)
        return 1
    print(build_report(search_phrase, result))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else "CHERKASOV"))
