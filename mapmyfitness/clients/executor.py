"""Signed request execution."""

import logging
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urljoin

import requests
from requests_oauthlib import OAuth1

from mapmyfitness.config import Config
from mapmyfitness.exceptions import AuthRequired, TransportFailure
from mapmyfitness.models import Credentials, Response
from mapmyfitness.services.token_storage import TokenStorage

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT")


def format_value(value: Any) -> str:
    """Render one parameter value for the wire."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def clean_parameters(parameters: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop keys whose value is None and format the rest."""
    if not parameters:
        return {}
    return {
        key: format_value(value)
        for key, value in parameters.items()
        if value is not None
    }


class RequestExecutor:
    """Signs and issues one request with the stored access token."""

    def __init__(
        self,
        credentials: Credentials,
        storage: TokenStorage,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
    ):
        self.credentials = credentials
        self.storage = storage
        self.base_url = base_url or Config.API_BASE_URL
        self.session = session or requests.Session()
        self.timeout = timeout or Config.REQUEST_TIMEOUT

    def build_url(self, path: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return urljoin(base, path.lstrip("/"))

    def _auth(self) -> OAuth1:
        token = self.storage.retrieve_access_token()
        return OAuth1(
            self.credentials.consumer_key,
            client_secret=self.credentials.consumer_secret,
            resource_owner_key=token.token,
            resource_owner_secret=token.token_secret,
        )

    def execute(
        self,
        path: str,
        parameters: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Issue a signed call and return the raw body with its status."""
        if not self.storage.has_access_token():
            raise AuthRequired("You must be authorized to make requests")

        method = method.upper()
        url = self.build_url(path)
        params = clean_parameters(parameters)

        kwargs = {"data": params} if method in BODY_METHODS else {"params": params}

        try:
            response = self.session.request(
                method,
                url,
                auth=self._auth(),
                headers=dict(headers) if headers else None,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportFailure(f"{method} {path} failed: {e}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return Response(response.text, response.status_code)
