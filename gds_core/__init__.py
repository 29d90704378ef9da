"""Client helpers for a legacy GDS reservation host."""
from .config import ServiceConfig, create_config, create_config_from_env, create_config_from_mapping
from .errors import ConfigError, GdsError, ScreenParseError, TerminalError, TransportError, ValidationError
from .models import BookingSearchResult, ParseResult, PassengerListEntry, Price
from .parsers import PARSERS, booking_pnr, parse, parse_first, search_passengers_list
from .pipeline import compose, transform, validate
from .terminal import TerminalClient
from .utils import beautify_name, first_in_obj, price, rename_property
from .workflow import search_bookings_by_passenger_name

__all__ = [
    "BookingSearchResult",
    "ConfigError",
    "GdsError",
    "PARSERS",
    "ParseResult",
    "PassengerListEntry",
    "Price",
    "ScreenParseError",
    "ServiceConfig",
    "TerminalClient",
    "TerminalError",
    "TransportError",
    "ValidationError",
    "beautify_name",
    "booking_pnr",
    "compose",
    "create_config",
    "create_config_from_env",
    "create_config_from_mapping",
    "first_in_obj",
    "parse",
    "parse_first",
    "price",
    "rename_property",
    "search_bookings_by_passenger_name",
    "search_passengers_list",
    "transform",
    "validate",
]
