"""OAuth 1.0a session lifecycle.

The handshake runs across two requests of the same user session::

    UNAUTHENTICATED --init_session()--> AWAITING_CALLBACK   (returns Redirect)
    AWAITING_CALLBACK --init_session(callback)--> AUTHORIZED (returns AccessGranted)

The state is kept as an integer in a per-session state store so it survives
the round trip through the provider. Deciding the next step is a pure
function (:func:`plan_transition`); :class:`SessionController` performs the
side effect and records the new state only once it succeeded.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Mapping, MutableMapping, Optional, Union

from flask import has_request_context, session as flask_session

from mapmyfitness.config import Config
from mapmyfitness.exceptions import AuthFailure, TokenNotFound
from mapmyfitness.services.token_storage import TokenStorage

logger = logging.getLogger(__name__)


class SessionState(IntEnum):
    UNAUTHENTICATED = 0
    AWAITING_CALLBACK = 1
    AUTHORIZED = 2


class Effect(Enum):
    REQUEST_AUTHORIZATION = "request_authorization"
    EXCHANGE_VERIFIER = "exchange_verifier"
    NONE = "none"


@dataclass(frozen=True)
class Transition:
    state: SessionState
    effect: Effect


@dataclass(frozen=True)
class Redirect:
    """Send the user agent to ``url``; the handshake continues on callback."""

    url: str
    kind: str = "redirect"


@dataclass(frozen=True)
class AccessGranted:
    """An access token is stored for this session."""

    kind: str = "access_granted"

    def __bool__(self):
        return True


SessionResult = Union[Redirect, AccessGranted]


def plan_transition(
    state: SessionState, has_callback: bool, has_access_token: bool
) -> Transition:
    """Return the state to move to and the side effect that gets it there."""
    if state is SessionState.AWAITING_CALLBACK and not has_callback:
        # User came back without callback data: stale or abandoned handshake
        state = SessionState.UNAUTHENTICATED
    if state is SessionState.AUTHORIZED and not has_access_token:
        state = SessionState.UNAUTHENTICATED

    if state is SessionState.UNAUTHENTICATED:
        return Transition(SessionState.AWAITING_CALLBACK, Effect.REQUEST_AUTHORIZATION)
    if state is SessionState.AWAITING_CALLBACK:
        return Transition(SessionState.AUTHORIZED, Effect.EXCHANGE_VERIFIER)
    return Transition(SessionState.AUTHORIZED, Effect.NONE)


def default_state_store() -> MutableMapping:
    """Flask session inside a request context, a plain dict otherwise."""
    if has_request_context():
        return flask_session
    return {}


class SessionController:
    """Drives the handshake and records the resulting access token.

    Args:
        provider: Object exposing ``request_request_token()``,
            ``authorization_url(request_token)`` and
            ``request_access_token(token, verifier, token_secret)``.
        storage: Token storage backend.
        state_store: Mapping holding the handshake progress flag.
    """

    def __init__(
        self,
        provider,
        storage: TokenStorage,
        state_store: Optional[MutableMapping] = None,
    ):
        self.provider = provider
        self.storage = storage
        self.state_store = state_store if state_store is not None else default_state_store()
        self.state_key = Config.SESSION_STATE_KEY

    @property
    def state(self) -> SessionState:
        try:
            return SessionState(int(self.state_store.get(self.state_key) or 0))
        except (TypeError, ValueError):
            return SessionState.UNAUTHENTICATED

    def _set_state(self, state: SessionState):
        self.state_store[self.state_key] = int(state)

    def is_authorized(self) -> bool:
        try:
            return self.storage.has_access_token()
        except Exception as e:
            logger.warning(f"Token storage unavailable: {e}")
            return False

    def init_session(self, callback_args: Optional[Mapping[str, str]] = None) -> SessionResult:
        """Advance the handshake by one step.

        Args:
            callback_args: Query arguments of the incoming request. The
                provider's callback carries ``oauth_token`` and
                ``oauth_verifier``.

        Returns:
            ``Redirect`` when the user must visit the provider,
            ``AccessGranted`` once an access token is stored.

        Raises:
            AuthFailure: The provider rejected the callback data.
            TransportFailure: The request token could not be fetched.
        """
        callback_args = callback_args or {}
        has_callback = bool(callback_args.get("oauth_token"))
        transition = plan_transition(self.state, has_callback, self.is_authorized())

        if transition.effect is Effect.REQUEST_AUTHORIZATION:
            return self._request_authorization(transition)
        if transition.effect is Effect.EXCHANGE_VERIFIER:
            return self._exchange_verifier(transition, callback_args)

        self._set_state(transition.state)
        return AccessGranted()

    def _request_authorization(self, transition: Transition) -> Redirect:
        request_token = self.provider.request_request_token()
        self.storage.store_request_token(request_token)
        url = self.provider.authorization_url(request_token)
        self._set_state(transition.state)
        logger.info("Redirecting user agent to the authorization page")
        return Redirect(url)

    def _exchange_verifier(self, transition: Transition, callback_args) -> AccessGranted:
        oauth_token = callback_args.get("oauth_token")
        verifier = callback_args.get("oauth_verifier")

        try:
            request_token = self.storage.retrieve_request_token()
            if request_token.token != oauth_token:
                raise AuthFailure("Callback token does not match the pending request token")
            if not verifier:
                raise AuthFailure("Callback is missing oauth_verifier")
            access_token = self.provider.request_access_token(
                oauth_token, verifier, request_token.token_secret
            )
        except TokenNotFound as e:
            self._set_state(SessionState.UNAUTHENTICATED)
            logger.error("Callback received but no request token is pending")
            raise AuthFailure("No pending request token for this session") from e
        except AuthFailure as e:
            self._set_state(SessionState.UNAUTHENTICATED)
            logger.error(f"Authorization failed: {e}")
            raise

        self.storage.store_access_token(access_token)
        self._set_state(transition.state)
        logger.info("Authorization completed")
        return AccessGranted()

    def reset_session(self) -> None:
        """Forget tokens and handshake progress. Never raises."""
        try:
            self.storage.clear_token()
        except Exception as e:
            logger.warning(f"Failed to clear tokens: {e}")
        self.state_store.pop(self.state_key, None)
