"""Exception types raised by the GDS client."""
from __future__ import annotations

from typing import Optional


class GdsError(Exception):
    """Base class for every error raised by :mod:`gds_core`."""


class ConfigError(GdsError):
    """Raised when the service configuration is incomplete."""


class ValidationError(GdsError):
    """Raised by request parameter validators."""


class TerminalError(GdsError):
    """Raised when the terminal host rejects a request."""


class TransportError(TerminalError):
    """Raised when the HTTP transport fails before the host answers."""


class ScreenParseError(GdsError):
    """Raised when a workflow receives a screen no parser recognises."""

    def __init__(self, message: str, screen: Optional[str] = None) -> None:
        super().__init__(message)
        self.screen = screen
