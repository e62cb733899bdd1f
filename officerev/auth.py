"""Bearer-token check guarding protected endpoints."""

from __future__ import annotations

import functools
from typing import Callable, Optional

from flask import jsonify, make_response, request

ACCESS_TOKEN = "token"
EXPECTED_HEADER = f"Bearer {ACCESS_TOKEN}"
INFO_HEADER = "Add token"
UNAUTHORIZED_MESSAGE = (
    "Unauthorized or missing token goto Authorization ,On swagger you would see "
    f"'Authorization'. insert access Token -- token is '{EXPECTED_HEADER}'"
)


def is_authorized(header_value: Optional[str]) -> bool:
    """Return whether an Authorization header value carries the access token."""
    return header_value == EXPECTED_HEADER


def require_token(view: Callable) -> Callable:
    """Wrap a Flask view so it answers 401 unless the token is supplied."""

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        if is_authorized(request.headers.get("Authorization")):
            response = make_response(view(*args, **kwargs))
        else:
            response = make_response(jsonify(error=UNAUTHORIZED_MESSAGE), 401)
        response.headers["X-Info"] = INFO_HEADER
        return response

    return wrapper