"""Tests for signed request execution."""

from datetime import date

import pytest
import requests
from requests_oauthlib import OAuth1

from mapmyfitness.clients.executor import RequestExecutor, clean_parameters
from mapmyfitness.exceptions import AuthRequired, TransportFailure
from mapmyfitness.models import AccessToken, Credentials
from mapmyfitness.services.token_storage import MemoryTokenStorage


class _Resp:
    def __init__(self, text="{}", status_code=200):
        self.text = text
        self.status_code = status_code


class _HttpSession:
    """Records every request instead of sending it."""

    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response or _Resp()
        self.error = error

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def storage():
    storage = MemoryTokenStorage()
    storage.store_access_token(AccessToken("AT", "ATS"))
    return storage


def _executor(storage, http):
    credentials = Credentials("ck", "cs", "https://app/cb")
    return RequestExecutor(
        credentials, storage, base_url="https://api.example.com/3.1", session=http
    )


def test_unauthorized_call_does_no_io():
    http = _HttpSession()
    executor = _executor(MemoryTokenStorage(), http)

    with pytest.raises(AuthRequired):
        executor.execute("users/get_user", {"o": "json"})

    assert http.calls == []


def test_get_sends_query_parameters(storage):
    http = _HttpSession(_Resp('{"ok": 1}', 200))

    response = _executor(storage, http).execute(
        "users/get_user", {"user_id": 42, "user_key": None, "o": "json"}
    )

    assert response.body == '{"ok": 1}'
    assert response.code == 200
    method, url, kwargs = http.calls[0]
    assert method == "GET"
    assert url == "https://api.example.com/3.1/users/get_user"
    assert kwargs["params"] == {"user_id": "42", "o": "json"}
    assert "data" not in kwargs


def test_post_sends_form_body(storage):
    http = _HttpSession()

    _executor(storage, http).execute("/workouts/create_workout", {"a": 1}, method="post")

    method, url, kwargs = http.calls[0]
    assert method == "POST"
    assert url.endswith("/3.1/workouts/create_workout")
    assert kwargs["data"] == {"a": "1"}


def test_extra_headers_are_forwarded(storage):
    http = _HttpSession()

    _executor(storage, http).execute("x", headers={"X-Test": "1"})

    assert http.calls[0][2]["headers"] == {"X-Test": "1"}


def test_request_is_signed_with_access_token(storage):
    http = _HttpSession()

    _executor(storage, http).execute("users/get_user", {"o": "json"})

    method, url, kwargs = http.calls[0]
    auth = kwargs["auth"]
    assert isinstance(auth, OAuth1)

    prepared = requests.Request(method, url, params=kwargs["params"]).prepare()
    signed = auth(prepared)
    header = str(signed.headers["Authorization"])
    assert 'oauth_token="AT"' in header
    assert 'oauth_consumer_key="ck"' in header
    assert "oauth_signature=" in header


def test_error_status_is_returned(storage):
    http = _HttpSession(_Resp("nope", 404))

    response = _executor(storage, http).execute("missing")

    assert response.code == 404
    assert response.ok is False


def test_network_error_is_transport_failure(storage):
    http = _HttpSession(error=requests.ConnectionError("refused"))

    with pytest.raises(TransportFailure):
        _executor(storage, http).execute("users/get_user")

    assert len(http.calls) == 1


def test_clean_parameters():
    params = clean_parameters({
        "missing": None,
        "flag": True,
        "off": False,
        "day": date(2013, 4, 14),
        "ids": [1, 2, 3],
        "name": "run",
        "zero": 0,
    })

    assert params == {
        "flag": "1",
        "off": "0",
        "day": "2013-04-14",
        "ids": "1,2,3",
        "name": "run",
        "zero": "0",
    }


def test_clean_parameters_empty():
    assert clean_parameters(None) == {}
