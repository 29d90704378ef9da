"""Validators and transformers for request parameters."""
from __future__ import annotations

import re
from typing import Any, Callable, Dict

from .errors import ValidationError
from .pipeline import compose, transform, validate
from .utils import rename_property

Params = Dict[str, Any]

_SEARCH_PHRASE_PATTERN = re.compile(r"^[A-Za-z][A-Za-z /'-]*$")
_SEARCH_PHRASE_MAX_LENGTH = 60


def require(*keys: str) -> Callable[[Params], None]:
    """Build a validator that fails when any of ``keys`` is missing or ``None``."""

    def check(params: Params) -> None:
        missing = [key for key in keys if params.get(key) is None]
        if missing:
            raise ValidationError(f"Missing required parameter(s): {', '.join(missing)}")

    return check


def search_phrase(params: Params) -> None:
    phrase = params.get("search_phrase")
    if not isinstance(phrase, str) or not phrase.strip():
        raise ValidationError("search_phrase must be a non-empty string")
    if len(phrase) > _SEARCH_PHRASE_MAX_LENGTH:
        raise ValidationError(
            f"search_phrase must not exceed {_SEARCH_PHRASE_MAX_LENGTH} characters"
        )
    if not _SEARCH_PHRASE_PATTERN.match(phrase.strip()):
        raise ValidationError(f"search_phrase contains unsupported characters: {phrase!r}")


def rename(old_key: str, new_key: str) -> Callable[[Params], Params]:
    """Build a transformer moving ``old_key`` to ``new_key`` when present."""

    def run(params: Params) -> Params:
        return rename_property(params, old_key, new_key)

    return run


def strip_strings(params: Params) -> None:
    for key, value in params.items():
        if isinstance(value, str):
            params[key] = value.strip()


def upper_search_phrase(params: Params) -> None:
    if isinstance(params.get("search_phrase"), str):
        params["search_phrase"] = params["search_phrase"].upper()


# camelCase input from JSON payloads is renamed before validation runs.
SEARCH_BOOKINGS_PARAMS = compose(
    transform(rename("searchPhrase", "search_phrase")),
    validate(require("search_phrase"), search_phrase),
    transform(strip_strings, upper_search_phrase),
)
