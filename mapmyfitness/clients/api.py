"""MapMyFitness API client.

Usage in a Flask view::

    client = MapMyFitnessClient(key, secret)
    result = client.init_session(request.args)
    if isinstance(result, Redirect):
        return redirect(result.url)
    profile = client.get_user()
"""

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

from flask import has_request_context, request

from mapmyfitness.clients.catalog import (
    ActivityFeedEndpoints,
    EventEndpoints,
    GearEndpoints,
    GroupEndpoints,
    RouteEndpoints,
    UserEndpoints,
    WorkoutEndpoints,
)
from mapmyfitness.clients.executor import RequestExecutor
from mapmyfitness.clients.provider import OAuthProvider
from mapmyfitness.config import Config
from mapmyfitness.decoder import decode
from mapmyfitness.exceptions import ApiError, ConfigurationError, MalformedResponse
from mapmyfitness.models import Credentials, Response, ResponseFormat
from mapmyfitness.services.session import SessionController, SessionResult, SessionState
from mapmyfitness.services.token_storage import TokenStorage, default_token_storage

logger = logging.getLogger(__name__)


def _current_url() -> Optional[str]:
    """URL of the Flask request being handled, query stripped."""
    if has_request_context():
        return request.base_url
    return None


def _error_message(body) -> Optional[str]:
    if isinstance(body, dict):
        for key in ("error", "message", "error_message"):
            if body.get(key):
                return str(body[key])
    if isinstance(body, str) and body:
        return body[:200]
    return None


class MapMyFitnessClient(
    ActivityFeedEndpoints,
    EventEndpoints,
    GearEndpoints,
    GroupEndpoints,
    RouteEndpoints,
    UserEndpoints,
    WorkoutEndpoints,
):
    """Client for the MapMyFitness API.

    Args:
        consumer_key: Application consumer key.
        consumer_secret: Application consumer secret.
        callback_url: Where the provider sends the user back. Defaults to
            ``Config.CALLBACK_URL``, then to the current request URL.
        response_format: One of ``json``, ``xml``, ``php``, ``txt``.
        storage: Token storage backend, see ``default_token_storage``.
        state_store: Mapping holding the handshake progress flag.
        allow_native_format: Must be set to use the ``php`` format, whose
            bodies are unserialized.
        provider: Handshake provider, mainly for tests.
        http_session: ``requests.Session`` used for signed calls.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        callback_url: Optional[str] = None,
        response_format="json",
        storage: Optional[TokenStorage] = None,
        state_store: Optional[MutableMapping] = None,
        allow_native_format: bool = False,
        provider=None,
        http_session=None,
    ):
        super().__init__()
        if not consumer_key or not consumer_secret:
            raise ConfigurationError("Consumer key and secret are required")

        self.response_format = ResponseFormat.parse(response_format)
        if self.response_format is ResponseFormat.PHP and not allow_native_format:
            raise ConfigurationError(
                "The 'php' response format unserializes response bodies; "
                "pass allow_native_format=True to enable it"
            )

        callback_url = callback_url or Config.CALLBACK_URL or _current_url()
        if not callback_url:
            raise ConfigurationError(
                "No callback URL given and no request to derive it from"
            )

        self.credentials = Credentials(consumer_key, consumer_secret, callback_url)
        self.storage = storage if storage is not None else default_token_storage()
        self.provider = provider or OAuthProvider(self.credentials)
        self.session = SessionController(self.provider, self.storage, state_store)
        self.executor = RequestExecutor(self.credentials, self.storage, session=http_session)

    @classmethod
    def from_config(cls, **overrides) -> "MapMyFitnessClient":
        """Build a client from ``Config`` values, keyword arguments win."""
        options = {
            "consumer_key": Config.CONSUMER_KEY,
            "consumer_secret": Config.CONSUMER_SECRET,
            "callback_url": Config.CALLBACK_URL,
            "response_format": Config.RESPONSE_FORMAT,
        }
        options.update(overrides)
        return cls(**options)

    # Session

    @property
    def session_state(self) -> SessionState:
        return self.session.state

    def is_authorized(self) -> bool:
        return self.session.is_authorized()

    def init_session(self, callback_args: Optional[Mapping[str, str]] = None) -> SessionResult:
        """Advance the OAuth handshake, see ``SessionController.init_session``."""
        return self.session.init_session(callback_args)

    def reset_session(self) -> None:
        self.session.reset_session()

    # Requests

    def _fetch(self, path: str, parameters: Dict[str, Any]) -> Any:
        parameters["o"] = self.response_format.value
        response = self.executor.execute(path, parameters)

        if not response.ok:
            try:
                body = decode(response.body, self.response_format)
            except MalformedResponse:
                body = response.body
            message = _error_message(body)
            logger.error(f"{path} returned HTTP {response.code}: {message}")
            raise ApiError(
                f"{path} returned HTTP {response.code}",
                http_code=response.code,
                provider_message=message,
            )

        return decode(response.body, self.response_format)

    def custom_call(
        self,
        path: str,
        parameters: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Call any endpoint and return the decoded body with its status.

        No ``o`` parameter is added and HTTP error statuses are returned,
        not raised. An error body that does not decode is returned raw.
        """
        response = self.executor.execute(path, parameters, method=method, headers=headers)
        try:
            body = decode(response.body, self.response_format)
        except MalformedResponse:
            if response.ok:
                raise
            # Error pages from proxies are often not in the requested format
            body = response.body
        return Response(body, response.code)
