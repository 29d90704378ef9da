"""Configuration helpers for the GDS terminal client."""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on", "y"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", ""}
_REQUIRED_FIELDS = ("username", "password", "target_branch")

_ENV_PREFIX = "GDS_"
_CAMEL_CASE_KEYS = {
    "targetBranch": "target_branch",
    "emulatePcc": "emulate_pcc",
    "maxPages": "max_pages",
}


@dataclass
class ServiceConfig:
    """Credentials and connection settings for the reservation host."""

    username: str
    password: str
    target_branch: str
    emulate_pcc: Optional[str] = None
    region: str = "emea"
    production: bool = False
    timeout: float = 30.0
    max_pages: int = 10
    debug: int = 0

    def service_url(self, service: str) -> str:
        """Return the endpoint for ``service``, e.g. ``TerminalService``."""

        host = "universal-api.travelport.com" if self.production else "universal-api.pp.travelport.com"
        return f"https://{self.region}.{host}/B2BGateway/connect/uAPI/{service}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a loggable version of the configuration without the password."""

        return {
            "username": self.username,
            "password": "***",
            "target_branch": self.target_branch,
            "emulate_pcc": self.emulate_pcc,
            "region": self.region,
            "production": self.production,
            "timeout": self.timeout,
            "max_pages": self.max_pages,
            "debug": self.debug,
        }


def _parse_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    cleaned = str(value).strip().lower()
    if cleaned in _TRUE_VALUES:
        return True
    if cleaned in _FALSE_VALUES:
        return False
    return default


def _parse_float(value: Any, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(str(value).replace(",", ".").strip())
    except ValueError:
        return default


def _parse_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def _normalise_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {_CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}


def create_config_from_mapping(data: Mapping[str, Any]) -> ServiceConfig:
    """Create a configuration from a dict such as a parsed JSON credentials file."""

    values = _normalise_keys(data)
    missing = [name for name in _REQUIRED_FIELDS if not values.get(name)]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

    return ServiceConfig(
        username=str(values["username"]),
        password=str(values["password"]),
        target_branch=str(values["target_branch"]),
        emulate_pcc=(str(values["emulate_pcc"]) if values.get("emulate_pcc") else None),
        region=str(values.get("region") or "emea").lower(),
        production=_parse_bool(values.get("production")),
        timeout=_parse_float(values.get("timeout"), 30.0),
        max_pages=_parse_int(values.get("max_pages"), 10),
        debug=_parse_int(values.get("debug"), 0),
    )


def create_config_from_env(environ: Mapping[str, str] | None = None) -> ServiceConfig:
    """Create a configuration from ``GDS_*`` environment variables."""

    environ = os.environ if environ is None else environ
    values = {
        key[len(_ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(_ENV_PREFIX)
    }
    return create_config_from_mapping(values)


def create_config(data: Mapping[str, Any] | None = None) -> ServiceConfig:
    """Unified helper: a mapping is used as is, ``None`` reads the environment."""

    if data is None:
        return create_config_from_env()
    if isinstance(data, Mapping):
        return create_config_from_mapping(data)
    raise TypeError("Unsupported configuration payload type")
