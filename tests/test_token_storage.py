"""Tests for token storage backends."""

import pytest
from cryptography.fernet import Fernet
from flask import Flask

from mapmyfitness.database import TOKEN_KIND_ACCESS, get_token
from mapmyfitness.exceptions import TokenNotFound
from mapmyfitness.models import AccessToken, RequestToken
from mapmyfitness.services.token_storage import (
    DatabaseTokenStorage,
    MemoryTokenStorage,
    SessionTokenStorage,
    default_token_storage,
)


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Set up temp database and a stable encryption key."""
    db_file = tmp_path / "tokens.db"
    monkeypatch.setattr("mapmyfitness.config.Config.DATA_DIR", tmp_path)
    monkeypatch.setattr("mapmyfitness.config.Config.LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr("mapmyfitness.config.Config.DATABASE_PATH", db_file)
    monkeypatch.setattr("mapmyfitness.config.Config.ENCRYPTION_KEY_PATH", tmp_path / "key")
    monkeypatch.setattr(
        "mapmyfitness.config.Config.ENCRYPTION_KEY", Fernet.generate_key().decode()
    )
    return db_file


@pytest.fixture(params=["memory", "session", "database"])
def storage(request, db_path):
    if request.param == "memory":
        return MemoryTokenStorage()
    if request.param == "session":
        return SessionTokenStorage({})
    return DatabaseTokenStorage("alice")


def test_empty_storage(storage):
    assert storage.has_access_token() is False
    with pytest.raises(TokenNotFound):
        storage.retrieve_access_token()
    with pytest.raises(TokenNotFound):
        storage.retrieve_request_token()


def test_store_and_retrieve(storage):
    storage.store_request_token(RequestToken("rt", "rts"))
    storage.store_access_token(AccessToken("at", "ats"))

    assert storage.has_access_token() is True
    assert storage.retrieve_request_token() == RequestToken("rt", "rts")
    assert storage.retrieve_access_token() == AccessToken("at", "ats")


def test_access_token_is_overwritten(storage):
    storage.store_access_token(AccessToken("old", "old-secret"))
    storage.store_access_token(AccessToken("new", "new-secret"))

    assert storage.retrieve_access_token() == AccessToken("new", "new-secret")


def test_clear_token(storage):
    storage.store_request_token(RequestToken("rt", "rts"))
    storage.store_access_token(AccessToken("at", "ats"))

    storage.clear_token()

    assert storage.has_access_token() is False
    with pytest.raises(TokenNotFound):
        storage.retrieve_request_token()


def test_clear_token_on_empty_storage(storage):
    storage.clear_token()
    storage.clear_token()
    assert storage.has_access_token() is False


def test_database_secrets_are_encrypted(db_path):
    storage = DatabaseTokenStorage("alice")
    storage.store_access_token(AccessToken("at", "plain-secret"))

    row = get_token("alice", TOKEN_KIND_ACCESS)
    assert row["secret_encrypted"] != "plain-secret"
    assert storage.retrieve_access_token().token_secret == "plain-secret"


def test_database_storage_is_keyed_per_owner(db_path):
    DatabaseTokenStorage("alice").store_access_token(AccessToken("a", "s"))

    assert DatabaseTokenStorage("alice").has_access_token() is True
    assert DatabaseTokenStorage("bob").has_access_token() is False


def test_session_storage_keeps_plain_values():
    session = {}
    SessionTokenStorage(session).store_access_token(AccessToken("at", "ats"))

    assert session[SessionTokenStorage.ACCESS_KEY] == {"token": "at", "token_secret": "ats"}


def test_default_storage_outside_request():
    assert isinstance(default_token_storage(), MemoryTokenStorage)


def test_default_storage_inside_request():
    app = Flask(__name__)
    app.secret_key = "test"
    with app.test_request_context("/"):
        storage = default_token_storage()
        assert isinstance(storage, SessionTokenStorage)
        storage.store_access_token(AccessToken("at", "ats"))
        assert storage.has_access_token() is True


def test_empty_secret_round_trip(storage):
    storage.store_access_token(AccessToken("at", ""))

    assert storage.retrieve_access_token() == AccessToken("at", "")


def test_database_token_under_rotated_key(db_path, monkeypatch):
    DatabaseTokenStorage("alice").store_access_token(AccessToken("at", "ats"))
    DatabaseTokenStorage("alice").store_request_token(RequestToken("rt", "rts"))

    monkeypatch.setattr(
        "mapmyfitness.config.Config.ENCRYPTION_KEY", Fernet.generate_key().decode()
    )
    storage = DatabaseTokenStorage("alice")

    assert storage.has_access_token() is False
    with pytest.raises(TokenNotFound):
        storage.retrieve_access_token()
    with pytest.raises(TokenNotFound):
        storage.retrieve_request_token()

    # Authorizing again replaces the unreadable token
    storage.store_access_token(AccessToken("new", "new-secret"))
    assert storage.retrieve_access_token() == AccessToken("new", "new-secret")
