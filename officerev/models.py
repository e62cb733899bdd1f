"""Data types shared by the reservation service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Reservation:
    """An office reservation: size, monthly price and the days it covers."""

    capacity: int
    monthly_rate: float
    start_date: date
    end_date: date | None = None


@dataclass(frozen=True)
class ErrorResponse:
    """Error payload returned by the HTTP API."""

    error: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready form of the error."""
        return {"error": self.error}