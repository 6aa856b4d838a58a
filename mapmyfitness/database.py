"""Database module for SQLite operations."""

import sqlite3
import logging

from mapmyfitness.config import Config

logger = logging.getLogger(__name__)

TOKEN_KIND_REQUEST = "request"
TOKEN_KIND_ACCESS = "access"


def get_connection():
    """Get a database connection with WAL mode enabled."""
    Config.ensure_directories()
    conn = sqlite3.connect(Config.DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def init_db():
    """Initialize the database with required tables."""
    Config.ensure_directories()

    with get_connection() as conn:
        cursor = conn.cursor()

        # One row per (owner, kind); storing a token replaces the previous one
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS oauth_tokens (
                owner TEXT NOT NULL,
                kind TEXT NOT NULL,
                token TEXT NOT NULL,
                secret_encrypted TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                PRIMARY KEY (owner, kind)
            )
        """)

        conn.commit()
        logger.debug("Database initialized successfully")


# Token operations
def save_token(owner, kind, token, secret_encrypted):
    """Save or replace a token for an owner."""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute(
            """INSERT INTO oauth_tokens (owner, kind, token, secret_encrypted)
               VALUES (?, ?, ?, ?)
               ON CONFLICT(owner, kind) DO UPDATE SET
               token=excluded.token,
               secret_encrypted=excluded.secret_encrypted,
               updated_at=CURRENT_TIMESTAMP""",
            (owner, kind, token, secret_encrypted)
        )
        conn.commit()


def get_token(owner, kind):
    """Get a token row by owner and kind."""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT * FROM oauth_tokens WHERE owner = ? AND kind = ?",
            (owner, kind)
        )
        row = cursor.fetchone()
        return dict(row) if row else None


def delete_tokens(owner):
    """Delete every token of an owner."""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM oauth_tokens WHERE owner = ?", (owner,))
        conn.commit()
        return cursor.rowcount > 0


def list_owners():
    """List owners holding an access token."""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute(
            "SELECT owner, updated_at FROM oauth_tokens WHERE kind = ? ORDER BY owner",
            (TOKEN_KIND_ACCESS,)
        )
        return [dict(row) for row in cursor.fetchall()]
