from flask import Flask

import pytest

from officerev.auth import EXPECTED_HEADER, INFO_HEADER, is_authorized, require_token


def _ok():
    return "ok"


def _client_for(view):
    app = Flask(__name__)
    app.add_url_rule("/protected", view_func=view)
    return app.test_client()


def test_is_authorized_accepts_bearer_token():
    assert is_authorized("Bearer token") is True


@pytest.mark.parametrize("value", [None, "", "token", "Bearer other", "bearer token"])
def test_is_authorized_rejects_others(value):
    assert is_authorized(value) is False


def test_require_token_rejects_missing_header():
    client = _client_for(require_token(_ok))
    response = client.get("/protected")
    assert response.status_code == 401
    assert EXPECTED_HEADER in response.get_json()["error"]
    assert response.headers["X-Info"] == INFO_HEADER


def test_require_token_rejects_wrong_header():
    client = _client_for(require_token(_ok))
    response = client.get("/protected", headers={"Authorization": "Bearer other"})
    assert response.status_code == 401


def test_require_token_passes_through():
    client = _client_for(require_token(_ok))
    response = client.get("/protected", headers={"Authorization": EXPECTED_HEADER})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "ok"
    assert response.headers["X-Info"] == INFO_HEADER


def test_require_token_keeps_view_name():
    def listing():
        return "x"

    assert require_token(listing).__name__ == "listing"