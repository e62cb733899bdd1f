"""Swagger 2.0 description of the HTTP API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

TITLE = "Office Reservation API"
VERSION = "1.0"
DESCRIPTION = "API to calculate monthly revenue and display office reservations."
TAG = "OfficeReservation API"

_SWAGGER_VERSION = "2.0"
_JSON = "application/json"
_HTML = "text/html"
_BODY_HINT = (
    "Request body should have a 'month' field in YYYY-MM format. "
    "Example: { \\"
)
_CALCULATE_DESCRIPTION = " ".join(
    (
        "Accepts JSON with month (YYYY-MM) and returns total revenue",
        "and unreserved capacity for that month based on CSV reservation data.",
    )
)
_MANUAL_DESCRIPTION = " ".join(
    ("Displays the CSV data of reservations", "in an HTML table.")
)

Schema = dict[str, Any]


def _string() -> Schema:
    return {"type": "string"}


def _ref(model: str) -> Schema:
    return {"$ref": f"#/definitions/models.{model}"}


def _object(**properties: Schema) -> Schema:
    return {"type": "object", "properties": properties}


def _response(status: int, schema: Schema, description: str | None = None) -> Schema:
    return {
        "description": description or HTTPStatus(status).phrase,
        "schema": schema,
    }


def _parameter(name: str, location: str, **details: Any) -> Schema:
    parameter = dict(details)
    parameter.update(name=name, required=True)
    parameter["in"] = location
    return parameter


def _operation(
    summary: str,
    description: str,
    produces: str,
    parameter: Schema,
    responses: dict[int, Schema],
    consumes: str | None = None,
) -> Schema:
    operation: Schema = {"description": description}
    if consumes is not None:
        operation["consumes"] = [consumes]
    operation.update(
        produces=[produces],
        tags=[TAG],
        summary=summary,
        parameters=[parameter],
        responses={str(code): body for code, body in responses.items()},
    )
    return operation


def _calculate_path() -> dict[str, Any]:
    body = _parameter(
        "request", "body", description=_BODY_HINT, schema=_ref("Request")
    )
    return {
        "post": _operation(
            summary="Calculate revenue and capacity for a month",
            description=_CALCULATE_DESCRIPTION,
            consumes=_JSON,
            produces=_JSON,
            parameter=body,
            responses={
                200: _response(200, _string()),
                400: _response(400, _ref("ErrorResponse")),
            },
        )
    }


def _manual_path() -> dict[str, Any]:
    header = _parameter(
        "Authorization",
        "header",
        type="string",
        default="Bearer",
        description="Insert your access token",
    )
    return {
        "get": _operation(
            summary="Show reservations table",
            description=_MANUAL_DESCRIPTION,
            produces=_HTML,
            parameter=header,
            responses={
                200: _response(200, _string(), "HTML page with CSV data"),
                500: _response(500, _ref("ErrorResponse")),
            },
        )
    }


def _definitions() -> dict[str, Schema]:
    month = _string()
    month["example"] = "2014-05"
    return {
        "models.ErrorResponse": _object(error=_string()),
        "models.Request": _object(month=month),
    }


def swagger_spec(host: str = "", base_path: str = "") -> dict[str, Any]:
    """Return the Swagger document for the given host and base path."""
    info = dict(description=DESCRIPTION, title=TITLE, contact={}, version=VERSION)
    return {
        "schemes": [],
        "swagger": _SWAGGER_VERSION,
        "info": info,
        "host": host,
        "basePath": base_path,
        "paths": {
            "/calculate": _calculate_path(),
            "/manual": _manual_path(),
        },
        "definitions": _definitions(),
    }