"""Token storage backends for the OAuth handshake.

Every backend implements the same six operations; the session controller and
the request executor only talk to :class:`TokenStorage`.
"""

import logging
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional

from flask import has_request_context, session as flask_session

from mapmyfitness.crypto import decrypt_secret, encrypt_secret
from mapmyfitness.database import (
    TOKEN_KIND_ACCESS,
    TOKEN_KIND_REQUEST,
    delete_tokens as db_delete_tokens,
    get_token as db_get_token,
    init_db,
    save_token as db_save_token,
)
from mapmyfitness.exceptions import SecretDecryptionError, TokenNotFound
from mapmyfitness.models import AccessToken, RequestToken

logger = logging.getLogger(__name__)


class TokenStorage(ABC):
    """Abstract persistence for request and access tokens."""

    @abstractmethod
    def has_access_token(self) -> bool:
        """Whether an access token is currently stored."""
        pass

    @abstractmethod
    def retrieve_access_token(self) -> AccessToken:
        """Return the stored access token or raise TokenNotFound."""
        pass

    @abstractmethod
    def store_access_token(self, token: AccessToken) -> None:
        """Store an access token, replacing any previous one."""
        pass

    @abstractmethod
    def retrieve_request_token(self) -> RequestToken:
        """Return the stored request token or raise TokenNotFound."""
        pass

    @abstractmethod
    def store_request_token(self, token: RequestToken) -> None:
        """Store a request token, replacing any previous one."""
        pass

    @abstractmethod
    def clear_token(self) -> None:
        """Remove every stored token. Safe on empty storage."""
        pass


class MemoryTokenStorage(TokenStorage):
    """Keeps tokens on the instance. Useful for scripts and tests."""

    def __init__(self):
        self._access_token: Optional[AccessToken] = None
        self._request_token: Optional[RequestToken] = None

    def has_access_token(self) -> bool:
        return self._access_token is not None

    def retrieve_access_token(self) -> AccessToken:
        if self._access_token is None:
            raise TokenNotFound("Access token not found")
        return self._access_token

    def store_access_token(self, token: AccessToken) -> None:
        self._access_token = token

    def retrieve_request_token(self) -> RequestToken:
        if self._request_token is None:
            raise TokenNotFound("Request token not found")
        return self._request_token

    def store_request_token(self, token: RequestToken) -> None:
        self._request_token = token

    def clear_token(self) -> None:
        self._access_token = None
        self._request_token = None


class SessionTokenStorage(TokenStorage):
    """Stores tokens in a web session (Flask ``session`` by default).

    Values are kept as plain dicts so they serialize into the session cookie.
    Any ``MutableMapping`` works as the backing session.
    """

    ACCESS_KEY = "mapmyfitness_access_token"
    REQUEST_KEY = "mapmyfitness_request_token"

    def __init__(self, session: Optional[MutableMapping] = None):
        self.session = session if session is not None else flask_session

    def _load(self, key):
        data = self.session.get(key)
        if not data:
            return None
        return data["token"], data["token_secret"]

    def _save(self, key, token, token_secret):
        self.session[key] = {"token": token, "token_secret": token_secret}

    def has_access_token(self) -> bool:
        return self._load(self.ACCESS_KEY) is not None

    def retrieve_access_token(self) -> AccessToken:
        data = self._load(self.ACCESS_KEY)
        if data is None:
            raise TokenNotFound("Access token not found in session")
        return AccessToken(*data)

    def store_access_token(self, token: AccessToken) -> None:
        self._save(self.ACCESS_KEY, token.token, token.token_secret)

    def retrieve_request_token(self) -> RequestToken:
        data = self._load(self.REQUEST_KEY)
        if data is None:
            raise TokenNotFound("Request token not found in session")
        return RequestToken(*data)

    def store_request_token(self, token: RequestToken) -> None:
        self._save(self.REQUEST_KEY, token.token, token.token_secret)

    def clear_token(self) -> None:
        self.session.pop(self.ACCESS_KEY, None)
        self.session.pop(self.REQUEST_KEY, None)


class DatabaseTokenStorage(TokenStorage):
    """Stores tokens in SQLite, one set per owner, secrets Fernet-encrypted."""

    def __init__(self, owner: str = "default"):
        self.owner = owner
        init_db()

    def _load(self, kind):
        row = db_get_token(self.owner, kind)
        if row is None:
            return None
        try:
            return row["token"], decrypt_secret(row["secret_encrypted"])
        except SecretDecryptionError:
            logger.warning(f"Ignoring unreadable {kind} token for {self.owner}")
            return None

    def _save(self, kind, token, token_secret):
        db_save_token(self.owner, kind, token, encrypt_secret(token_secret))

    def has_access_token(self) -> bool:
        return self._load(TOKEN_KIND_ACCESS) is not None

    def retrieve_access_token(self) -> AccessToken:
        data = self._load(TOKEN_KIND_ACCESS)
        if data is None:
            raise TokenNotFound(f"Access token not found for {self.owner}")
        return AccessToken(*data)

    def store_access_token(self, token: AccessToken) -> None:
        self._save(TOKEN_KIND_ACCESS, token.token, token.token_secret)
        logger.info(f"Stored access token for {self.owner}")

    def retrieve_request_token(self) -> RequestToken:
        data = self._load(TOKEN_KIND_REQUEST)
        if data is None:
            raise TokenNotFound(f"Request token not found for {self.owner}")
        return RequestToken(*data)

    def store_request_token(self, token: RequestToken) -> None:
        self._save(TOKEN_KIND_REQUEST, token.token, token.token_secret)

    def clear_token(self) -> None:
        if db_delete_tokens(self.owner):
            logger.info(f"Removed tokens for {self.owner}")


def default_token_storage() -> TokenStorage:
    """Session storage inside a Flask request, in-memory storage otherwise."""
    if has_request_context():
        return SessionTokenStorage()
    return MemoryTokenStorage()
