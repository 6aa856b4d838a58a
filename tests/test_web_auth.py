"""Tests for the web authorization flow."""

import pytest

from mapmyfitness.clients.api import MapMyFitnessClient
from mapmyfitness.exceptions import AuthFailure
from mapmyfitness.models import AccessToken, RequestToken
from mapmyfitness.web.app import create_app


class _Resp:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code


class _HttpSession:
    def __init__(self):
        self.calls = []
        self.text = '{"user": {"user_id": 42}}'
        self.status_code = 200

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return _Resp(self.text, self.status_code)


class _Provider:
    def request_request_token(self):
        return RequestToken("T", "TS")

    def authorization_url(self, request_token):
        return f"https://provider/authorize?oauth_token={request_token.token}"

    def request_access_token(self, token, verifier, token_secret):
        if verifier != "V123":
            raise AuthFailure("verifier rejected", http_code=401)
        return AccessToken("AT", "ATS")


@pytest.fixture(autouse=True)
def config(monkeypatch):
    monkeypatch.setattr("mapmyfitness.config.Config.CALLBACK_URL", None)
    monkeypatch.setattr("mapmyfitness.config.Config.SECRET_KEY", "test-secret")


@pytest.fixture
def http():
    return _HttpSession()


@pytest.fixture
def app(http):
    provider = _Provider()
    built = []

    def factory():
        client = MapMyFitnessClient("ck", "cs", provider=provider, http_session=http)
        built.append(client)
        return client

    app = create_app(testing=True, client_factory=factory)
    app.built_clients = built
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _authorize(client):
    response = client.get('/auth')
    assert response.status_code == 302
    response = client.get('/auth?oauth_token=T&oauth_verifier=V123')
    assert response.status_code == 302


def test_index_unauthorized(client):
    data = client.get('/').get_json()

    assert data['authorized'] is False
    assert data['state'] == 'UNAUTHENTICATED'
    assert data['user_id'] == '-'


def test_auth_redirects_to_provider(client):
    response = client.get('/auth')

    assert response.status_code == 302
    assert response.headers['Location'] == 'https://provider/authorize?oauth_token=T'
    assert client.get('/').get_json()['state'] == 'AWAITING_CALLBACK'


def test_callback_url_defaults_to_request_url(app, client):
    client.get('/auth')

    assert app.built_clients[-1].credentials.callback_url == 'http://localhost/auth'


def test_full_handshake(client):
    _authorize(client)

    data = client.get('/').get_json()
    assert data['authorized'] is True
    assert data['state'] == 'AUTHORIZED'


def test_authorized_auth_is_noop(client):
    _authorize(client)

    response = client.get('/auth')

    assert response.status_code == 302
    assert 'provider' not in response.headers['Location']


def test_rejected_verifier(client):
    client.get('/auth')

    response = client.get('/auth?oauth_token=T&oauth_verifier=WRONG')

    assert response.status_code == 403
    assert client.get('/').get_json()['authorized'] is False


def test_mismatched_callback_token(client, http):
    client.get('/auth')

    response = client.get('/auth?oauth_token=OTHER&oauth_verifier=V123')

    assert response.status_code == 403
    assert http.calls == []


def test_user_requires_authorization(client, http):
    response = client.get('/api/user')

    assert response.status_code == 401
    assert response.get_json()['login'] == '/auth'
    assert http.calls == []


def test_user(client, http):
    _authorize(client)

    response = client.get('/api/user')

    assert response.status_code == 200
    assert response.get_json() == {'user': {'user': {'user_id': 42}}}
    method, url, kwargs = http.calls[-1]
    assert url.endswith('users/get_user')
    assert kwargs['params'] == {'o': 'json'}


def test_user_by_id(client, http):
    _authorize(client)

    client.get('/api/user?user_id=7')

    assert http.calls[-1][2]['params'] == {'user_id': '7', 'o': 'json'}


def test_api_error_is_bad_gateway(client, http):
    _authorize(client)
    http.text = '{"error": "boom"}'
    http.status_code = 500

    response = client.get('/api/user')

    assert response.status_code == 502
    assert response.get_json()['http_code'] == 500


def test_custom_call(client, http):
    _authorize(client)
    http.text = '{"id": 1}'
    http.status_code = 404

    response = client.post('/api/call/v7.0/route/1/?a=1', json={'b': 2})

    assert response.get_json() == {'code': 404, 'body': {'id': 1}}
    method, url, kwargs = http.calls[-1]
    assert method == 'POST'
    assert url.endswith('/v7.0/route/1/')
    assert kwargs['data'] == {'a': '1', 'b': '2'}


def test_reset(client):
    _authorize(client)

    response = client.post('/auth/reset')

    assert response.status_code == 200
    data = client.get('/').get_json()
    assert data['authorized'] is False
    assert data['state'] == 'UNAUTHENTICATED'
