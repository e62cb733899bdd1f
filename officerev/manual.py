"""HTML page listing reservations and explaining the calculate endpoint."""

from __future__ import annotations

import json
from html import escape
from typing import Iterable, Iterator

from .models import Reservation

_TITLE = "Office Reservation CSV Manual"
_HEADING = "Office Reservation CSV Data"
_COLUMNS = ("Capacity", "Monthly Rate", "Start Date", "End Date")
_STYLES = {
    "table": ("border-collapse: collapse", "width: 80%"),
    "th, td": ("border: 1px solid #ccc", "padding: 8px", "text-align: left"),
    "th": ("background-color: #eee",),
    "pre": ("background: #f4f4f4", "padding: 10px"),
}
_EXAMPLE_REQUEST = {"month": "2023-06"}


def _el(tag: str, content: str) -> str:
    return f"<{tag}>{content}</{tag}>"


def _style_lines() -> Iterator[str]:
    for selector, declarations in _STYLES.items():
        body = "; ".join(declarations)
        yield f"{selector} {{ {body}; }}"


def _row_cells(reservation: Reservation) -> tuple[str, ...]:
    end = reservation.end_date
    return (
        escape(str(reservation.capacity)),
        f"{reservation.monthly_rate:.2f}",
        escape(reservation.start_date.isoformat()),
        escape(end.isoformat()) if end else "",
    )


def _lines(reservations: Iterable[Reservation]) -> Iterator[tuple[int, str]]:
    yield 0, "<html>"
    yield 0, "<head>"
    yield 1, _el("title", _TITLE)
    yield 1, "<style>"
    for rule in _style_lines():
        yield 2, rule
    yield 1, "</style>"
    yield 0, "</head>"
    yield 0, "<body>"
    yield 1, _el("h1", _HEADING)
    yield 1, "<table>"
    yield 2, "<thead>"
    yield 3, "<tr>"
    for column in _COLUMNS:
        yield 4, _el("th", column)
    yield 3, "</tr>"
    yield 2, "</thead>"
    yield 2, "<tbody>"
    for reservation in reservations:
        yield 3, "<tr>"
        for cell in _row_cells(reservation):
            yield 4, _el("td", cell)
        yield 3, "</tr>"
    yield 2, "</tbody>"
    yield 1, "</table>"
    yield 1, _el("h2", "How to Use the POST /calculate API")
    intro = (
        "Send a POST request to "
        + _el("code", "/calculate")
        + " with JSON body specifying the month in "
        + _el("code", "YYYY-MM")
        + " format. For example:"
    )
    yield 1, _el("p", intro)
    example = escape(json.dumps(_EXAMPLE_REQUEST, indent=2), quote=False)
    yield 1, _el("pre", example)
    outro = (
        "The API will return JSON with total revenue and "
        "unreserved capacity for the given month."
    )
    yield 1, _el("p", outro)
    yield 0, "</body>"
    yield 0, "</html>"


def render_manual(reservations: Iterable[Reservation]) -> str:
    """Render the reservations as an HTML table with usage notes."""
    return "\n".join("  " * depth + text for depth, text in _lines(reservations))