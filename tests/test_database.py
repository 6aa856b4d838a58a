"""Tests for database module."""

import pytest

from mapmyfitness.database import (
    TOKEN_KIND_ACCESS,
    TOKEN_KIND_REQUEST,
    delete_tokens,
    get_token,
    init_db,
    list_owners,
    save_token,
)


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Create a temporary database for testing."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr("mapmyfitness.config.Config.DATA_DIR", tmp_path)
    monkeypatch.setattr("mapmyfitness.config.Config.LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr("mapmyfitness.config.Config.DATABASE_PATH", db_path)
    init_db()
    return db_path


def test_init_db(temp_db):
    """Test database initialization."""
    # Should not raise any exceptions
    init_db()
    assert temp_db.exists()


def test_save_and_get_token(temp_db):
    save_token("alice", TOKEN_KIND_ACCESS, "tok", "enc-secret")

    row = get_token("alice", TOKEN_KIND_ACCESS)
    assert row is not None
    assert row["token"] == "tok"
    assert row["secret_encrypted"] == "enc-secret"
    assert get_token("alice", TOKEN_KIND_REQUEST) is None


def test_save_token_replaces_previous(temp_db):
    save_token("alice", TOKEN_KIND_ACCESS, "old", "s1")
    save_token("alice", TOKEN_KIND_ACCESS, "new", "s2")

    assert get_token("alice", TOKEN_KIND_ACCESS)["token"] == "new"


def test_tokens_are_scoped_per_owner(temp_db):
    save_token("alice", TOKEN_KIND_ACCESS, "a", "s")
    save_token("bob", TOKEN_KIND_REQUEST, "b", "s")

    assert get_token("alice", TOKEN_KIND_ACCESS) is not None
    assert get_token("bob", TOKEN_KIND_ACCESS) is None
    assert [o["owner"] for o in list_owners()] == ["alice"]


def test_delete_tokens(temp_db):
    save_token("alice", TOKEN_KIND_ACCESS, "a", "s")
    save_token("alice", TOKEN_KIND_REQUEST, "r", "s")

    assert delete_tokens("alice") is True
    assert get_token("alice", TOKEN_KIND_ACCESS) is None
    assert get_token("alice", TOKEN_KIND_REQUEST) is None


def test_delete_tokens_of_unknown_owner(temp_db):
    assert delete_tokens("nobody") is False
