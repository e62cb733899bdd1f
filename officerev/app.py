"""HTTP service reporting monthly office revenue and unreserved capacity."""

from __future__ import annotations

import argparse
import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from flask import Flask, Response, jsonify, request

from .auth import require_token
from .models import ErrorResponse, Reservation
from .reservations import (
    ReservationError,
    days_in_month,
    overlap_days,
    read_reservations,
)
from .spec import swagger_spec

logger = logging.getLogger(__name__)

_MONTH = re.compile(r"([0-9]{4})-([0-9]{2})")


@dataclass(frozen=True)
class MonthSummary:
    """Expected revenue and unreserved capacity for one month."""

    month: str
    revenue: float
    unreserved_capacity: int

    def format(self) -> str:
        """Return the plain-text report line."""
        return (
            f"{self.month}: expected revenue: ${self.revenue:.2f}, "
            "expected total capacity of the unreserved offices: "
            f"{self.unreserved_capacity}"
        )


def parse_month(text: str) -> date:
    """Parse a YYYY-MM string into the first day of that month."""
    match = _MONTH.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise ValueError(f'cannot parse "{text}" as "YYYY-MM"')
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f'parsing "{text}": month out of range')
    try:
        return date(year, month, 1)
    except ValueError as exc:
        raise ValueError(f'parsing "{text}": {exc}') from exc


def summarize_month(month: str, reservations: Iterable[Reservation]) -> MonthSummary:
    """Pro-rate revenue of reservations overlapping the month; sum the rest's capacity."""
    first = parse_month(month)
    days = days_in_month(first.year, first.month)
    last = first.replace(day=days)
    revenue = 0.0
    unreserved = 0
    for reservation in reservations:
        overlap = overlap_days(reservation, first, last)
        if overlap:
            revenue += (reservation.monthly_rate / days) * overlap
        else:
            unreserved += reservation.capacity
    return MonthSummary(month, revenue, unreserved)


def _month_from_body(raw: str) -> str:
    payload: Any = json.loads(raw)
    if payload is None:
        return ""
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    month = payload.get("month")
    if month is None:
        return ""
    if not isinstance(month, str):
        raise ValueError("field 'month' must be a string")
    return month


def _error(message: str, status: int):
    return jsonify(ErrorResponse(message).to_dict()), status


def create_app(input_path: Union[str, PathLike] = "input.txt") -> Flask:
    """Build the Flask application serving the reservation endpoints."""
    app = Flask(__name__)
    input_file = Path(input_path)

    @app.post("/calculate")
    def calculate():
        try:
            month = _month_from_body(request.get_data(as_text=True))
            parse_month(month)
        except ValueError as exc:
            return _error(str(exc), 400)
        try:
            reservations = read_reservations(input_file)
        except ReservationError as exc:
            logger.error("Failed to read reservations: %s", exc)
            return _error(f"Failed to read reservations: {exc}", 500)
        summary = summarize_month(month, reservations)
        return Response(summary.format(), status=200, content_type="text/plain")

    @app.get("/manual")
    @require_token
    def manual():
        try:
            data = input_file.read_bytes()
        except OSError as exc:
            return Response(
                f"Failed to read {input_file.name}: {exc}",
                status=500,
                content_type="text/plain; charset=utf-8",
            )
        return Response(data, status=200, content_type="text/plain")

    @app.get("/swagger/doc.json")
    def swagger_doc():
        return jsonify(swagger_spec("", ""))

    return app


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the reservation service."""
    parser = argparse.ArgumentParser(description="Office reservation revenue service.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--input", default="input.txt", help="reservation CSV file")
    args = parser.parse_args(argv)
    create_app(args.input).run(host=args.host, port=args.port)