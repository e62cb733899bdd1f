"""Reading office reservations from CSV and measuring month overlaps."""

from __future__ import annotations

import calendar
import csv
import logging
import re
from datetime import date
from os import PathLike
from typing import Sequence, Union

from .models import Reservation

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class ReservationError(ValueError):
    """Raised when reservation data cannot be read or parsed."""


def _to_int(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _to_float(text: str) -> float:
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_date(text: str) -> date:
    if not _ISO_DATE.fullmatch(text):
        raise ValueError(f"cannot parse {text!r} as YYYY-MM-DD")
    return date.fromisoformat(text)


def parse_reservation(row: Sequence[str]) -> Reservation:
    """Build a reservation from a CSV row of capacity, rate, start and end.

    Unparseable capacity, rate or start date fall back to zero values;
    a present but invalid end date is an error.
    """
    if len(row) < 4:
        raise ReservationError("row has fewer than 4 columns")
    capacity, rate, start, end = (field.strip() for field in row[:4])
    try:
        start_date = _to_date(start)
    except ValueError:
        start_date = date.min
    end_date = None
    if end:
        try:
            end_date = _to_date(end)
        except ValueError as exc:
            raise ReservationError("invalid end date") from exc
    return Reservation(
        capacity=_to_int(capacity),
        monthly_rate=_to_float(rate),
        start_date=start_date,
        end_date=end_date,
    )


def overlap_days(reservation: Reservation, month_start: date, month_end: date) -> int:
    """Return how many days of the month the reservation covers (0 if none)."""
    start = max(reservation.start_date, month_start)
    end = month_end
    if reservation.end_date is not None:
        end = min(reservation.end_date, month_end)
    if start > end:
        return 0
    return (end - start).days + 1


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def read_reservations(path: Union[str, PathLike] = "input.txt") -> list[Reservation]:
    """Read reservations from a CSV file whose first row is a header.

    Rows that cannot be parsed are logged and skipped.
    """
    try:
        handle = open(path, newline="", encoding="utf-8")
    except OSError as exc:
        raise ReservationError("cannot open input file") from exc
    with handle:
        try:
            rows = [
                row
                for row in csv.reader(handle, skipinitialspace=True, strict=True)
                if row
            ]
        except (csv.Error, UnicodeDecodeError) as exc:
            raise ReservationError("error reading CSV") from exc
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ReservationError("error reading CSV")

    reservations = []
    for number, row in enumerate(rows[1:], start=1):
        try:
            reservations.append(parse_reservation(row))
        except ReservationError as exc:
            logger.warning(
                "Skipping row %d: %s | Row data: %s", number, exc, ", ".join(row)
            )
    return reservations