"""Reporting helpers for passenger search results."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .models import BookingSearchResult
from .utils import beautify_name


def _display_name(entry: Dict[str, Any]) -> str:
    first = beautify_name((entry.get("first_name") or "").lower()) or ""
    last = beautify_name((entry.get("last_name") or "").lower()) or ""
    return f"{first} {last}".strip()


def generate_passenger_table(entries: Iterable[Dict[str, Any]]) -> str:
    """Return a markdown-style table of passenger list entries."""

    entry_list = list(entries)
    include_pnr = any(entry.get("pnr") for entry in entry_list)

    headers = ["#", "Name", "Datum", "Status"]
    if include_pnr:
        headers.append("PNR")

    rows: List[str] = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]

    if not entry_list:
        rows.append("| Keine Treffer |" + " |" * (len(headers) - 1))
        return "\n".join(rows)

    for entry in entry_list:
        columns = [
            str(entry.get("id", "")),
            _display_name(entry),
            str(entry.get("date") or "–"),
            "storniert" if entry.get("is_cancelled") else "aktiv",
        ]
        if include_pnr:
            columns.append(entry.get("pnr") or "–")
        rows.append("| " + " | ".join(columns) + " |")
    return "\n".join(rows)


def build_report(search_phrase: str, result: BookingSearchResult) -> str:
    """Create a text report for a passenger search."""

    lines: List[str] = [
        "Buchungssuche",
        "=============",
        "",
        f"Suchbegriff: {search_phrase}",
        "",
    ]

    if result.type == "pnr":
        lines.append(f"Direkter Treffer: {result.data}")
        return "\n".join(lines)

    entries = list(result.data)
    cancelled = sum(1 for entry in entries if entry.get("is_cancelled"))
    lines.append("Zusammenfassung:")
    lines.append(f"- {len(entries)} Buchungen gefunden")
    lines.append(f"- davon {cancelled} storniert")
    lines.append("")
    lines.append(generate_passenger_table(entries))
    return "\n".join(lines)
