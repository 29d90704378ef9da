"""Synchronous client for the host terminal emulation service."""
from __future__ import annotations

import logging
from typing import List, Optional
from xml.etree import ElementTree as ET
from xml.sax.saxutils import escape

import requests

from .config import ServiceConfig
from .errors import TerminalError, TransportError

LOGGER = logging.getLogger(__name__)

HOST = "1G"
TERMINAL_SERVICE = "TerminalService"
_CONTINUATION_MARKERS = (")><", "><")
_NEXT_PAGE_COMMAND = "MD"

_ENVELOPE = (
    '<soapenv:Envelope xmlns:soapenv="http://schemas.xmlsoap.org/soap/envelope/">'
    "<soapenv:Header/><soapenv:Body>{body}</soapenv:Body></soapenv:Envelope>"
)
_NAMESPACES = (
    'xmlns:terminal="http://www.travelport.com/schema/terminal_v33_0" '
    'xmlns:com="http://www.travelport.com/schema/common_v33_0"'
)
_POINT_OF_SALE = '<com:BillingPointOfSaleInfo OriginApplication="UAPI"/>'


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _find_all(root: ET.Element, name: str) -> List[ET.Element]:
    return [element for element in root.iter() if _local_name(element.tag) == name]


def _strip_continuation(screen: str) -> tuple[str, bool]:
    """Remove a trailing "more pages" marker and report whether it was there."""

    stripped = screen.rstrip()
    for marker in _CONTINUATION_MARKERS:
        if stripped.endswith(marker):
            return stripped[: -len(marker)].rstrip(), True
    return screen, False


class TerminalClient:
    """Runs terminal commands in a host session.

    A session is opened lazily on the first command and can be reused for
    several commands; use the client as a context manager to close it.
    """

    def __init__(self, config: ServiceConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.token: Optional[str] = None

    def __enter__(self) -> "TerminalClient":
        return self

    def __exit__(self, exc_type: object, exc: object, traceback: object) -> None:
        if exc_type is None:
            self.close_session()
            return
        try:
            self.close_session()
        except TerminalError as close_exc:
            LOGGER.warning("Could not end terminal session: %s", close_exc)

    def _request_attributes(self) -> str:
        return (
            f'AuthorizedBy="{escape(self.config.username)}" '
            f'TargetBranch="{escape(self.config.target_branch)}"'
        )

    def _post(self, body: str) -> ET.Element:
        url = self.config.service_url(TERMINAL_SERVICE)
        envelope = _ENVELOPE.format(body=body)
        if self.config.debug > 1:
            LOGGER.debug("POST %s\n%s", url, envelope)
        try:
            response = self.session.post(
                url,
                data=envelope.encode("utf-8"),
                headers={"Content-Type": "text/xml;charset=UTF-8"},
                auth=(f"Universal API/{self.config.username}", self.config.password),
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Terminal request failed: {exc}") from exc

        try:
            root = ET.fromstring(response.text)
        except ET.ParseError as exc:
            raise TransportError(
                f"Unexpected response from terminal service (HTTP {response.status_code})"
            ) from exc

        faults = _find_all(root, "Fault")
        if faults:
            fault_strings = _find_all(faults[0], "faultstring")
            message = fault_strings[0].text if fault_strings and fault_strings[0].text else "Unknown fault"
            raise TerminalError(message.strip())
        if response.status_code >= 400:
            raise TransportError(f"Terminal service returned HTTP {response.status_code}")
        return root

    def open_session(self) -> str:
        """Request a host token and switch to the emulated PCC when configured."""

        body = (
            f'<terminal:BinarySecurityTokenReq {_NAMESPACES} {self._request_attributes()} Host="{HOST}">'
            f"{_POINT_OF_SALE}"
            "</terminal:BinarySecurityTokenReq>"
        )
        root = self._post(body)
        tokens = _find_all(root, "HostToken")
        if not tokens or not tokens[0].text:
            raise TerminalError("Terminal service did not return a host token")
        self.token = tokens[0].text.strip()
        LOGGER.debug("Opened terminal session on branch %s", self.config.target_branch)

        if self.config.emulate_pcc:
            screen = self._execute(f"SEM/{self.config.emulate_pcc}/AG")
            if "PROCEED" not in screen:
                message = f"Could not emulate PCC {self.config.emulate_pcc}: {screen.strip()}"
                try:
                    self.close_session()
                except TerminalError as exc:
                    LOGGER.warning("Could not end terminal session: %s", exc)
                raise TerminalError(message)
        return self.token

    def _execute(self, command: str) -> str:
        body = (
            f"<terminal:TerminalReq {_NAMESPACES} {self._request_attributes()}>"
            f"{_POINT_OF_SALE}"
            f'<com:HostToken Host="{HOST}">{escape(self.token or "")}</com:HostToken>'
            f"<terminal:TerminalCommand>{escape(command)}</terminal:TerminalCommand>"
            "</terminal:TerminalReq>"
        )
        root = self._post(body)
        lines = [element.text or "" for element in _find_all(root, "Text")]
        return "\n".join(lines)

    def execute_command(self, command: str) -> str:
        """Execute ``command`` and return the full screen, following ``MD`` pages."""

        if self.token is None:
            self.open_session()

        LOGGER.debug("Executing terminal command %s", command)
        screen, has_more = _strip_continuation(self._execute(command))
        pages = [screen]
        while has_more and len(pages) < self.config.max_pages:
            LOGGER.debug("Fetching page %d for %s", len(pages) + 1, command)
            screen, has_more = _strip_continuation(self._execute(_NEXT_PAGE_COMMAND))
            pages.append(screen)
        if has_more:
            LOGGER.warning("Stopped paging %s after %d pages", command, len(pages))
        return "\n".join(pages)

    def close_session(self) -> None:
        """End the host session if one is open."""

        if self.token is None:
            return
        body = (
            f"<terminal:EndSessionReq {_NAMESPACES} {self._request_attributes()}>"
            f"{_POINT_OF_SALE}"
            f'<com:HostToken Host="{HOST}">{escape(self.token)}</com:HostToken>'
            "</terminal:EndSessionReq>"
        )
        try:
            self._post(body)
        finally:
            self.token = None
        LOGGER.debug("Closed terminal session")
