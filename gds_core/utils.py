"""Null-safe value helpers shared by parsers and request builders."""
from __future__ import annotations

import math
import re
from typing import Any, Dict, Hashable, Mapping, Optional

from .models import Price

_PRICE_PATTERN = re.compile(r"^\s*(?P<currency>[A-Za-z]{3})(?P<amount>\d+(?:\.\d+)?)\s*$")


def price(value: Any) -> Optional[Price]:
    """Split ``"UAH123"`` into ``Price("UAH", 123.0)``.

    Returns ``None`` for anything that is not a string or does not look like
    a currency code immediately followed by an amount.
    """

    if not isinstance(value, str):
        return None
    match = _PRICE_PATTERN.match(value)
    if not match:
        return None
    amount = float(match.group("amount"))
    if not math.isfinite(amount):
        return None
    return Price(currency=match.group("currency").upper(), value=amount)


def beautify_name(value: Any) -> Optional[str]:
    """Capitalise the first letter of every word, leaving the rest untouched."""

    if not isinstance(value, str):
        return None
    return " ".join(word[:1].upper() + word[1:] for word in value.split())


def first_in_obj(mapping: Optional[Mapping[Any, Any]]) -> Any:
    """Return the value stored under the first key in iteration order.

    Dicts iterate in insertion order. Empty or missing mappings yield ``None``.
    """

    if not mapping:
        return None
    return next(iter(mapping.values()))


def rename_property(mapping: Dict[Hashable, Any], old_key: Hashable, new_key: Hashable) -> Dict[Hashable, Any]:
    """Return a copy of ``mapping`` with ``old_key`` stored under ``new_key``.

    The renamed entry moves to the end, the remaining keys keep their order.
    Renaming a key to itself returns ``mapping`` as is.
    """

    if old_key == new_key:
        return mapping
    renamed = {key: value for key, value in mapping.items() if key != old_key}
    if old_key in mapping:
        renamed[new_key] = mapping[old_key]
    return renamed
