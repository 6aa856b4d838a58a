"""MapMyFitness OAuth 1.0a provider endpoints.

Wraps the three handshake endpoints (temporary credential, authorize, token
credential) on top of ``requests_oauthlib.OAuth1Session``.
"""

import logging
from typing import Optional

import requests
from requests_oauthlib import OAuth1Session
from requests_oauthlib.oauth1_session import TokenRequestDenied

from mapmyfitness.config import Config
from mapmyfitness.exceptions import AuthFailure, TransportFailure
from mapmyfitness.models import AccessToken, Credentials, RequestToken

logger = logging.getLogger(__name__)


class OAuthProvider:
    """Handshake calls against the provider."""

    def __init__(
        self,
        credentials: Credentials,
        request_token_url: Optional[str] = None,
        authorize_url: Optional[str] = None,
        access_token_url: Optional[str] = None,
        session_factory=OAuth1Session,
    ):
        self.credentials = credentials
        self.request_token_url = request_token_url or Config.REQUEST_TOKEN_URL
        self.authorize_url = authorize_url or Config.AUTHORIZE_URL
        self.access_token_url = access_token_url or Config.ACCESS_TOKEN_URL
        self._session_factory = session_factory

    def request_request_token(self) -> RequestToken:
        """Obtain a request token signed with the consumer credentials only."""
        oauth = self._session_factory(
            self.credentials.consumer_key,
            client_secret=self.credentials.consumer_secret,
            callback_uri=self.credentials.callback_url,
        )
        try:
            data = oauth.fetch_request_token(
                self.request_token_url, timeout=Config.REQUEST_TIMEOUT
            )
        except TokenRequestDenied as e:
            logger.error(f"Request token denied ({e.status_code}): {e}")
            raise AuthFailure(
                "Provider refused to issue a request token",
                http_code=e.status_code,
                provider_message=str(e),
            ) from e
        except requests.RequestException as e:
            logger.error(f"Request token call failed: {e}")
            raise TransportFailure(f"Request token call failed: {e}") from e
        except ValueError as e:
            logger.error(f"Unusable request token response: {e}")
            raise AuthFailure(f"Unusable request token response: {e}") from e

        return RequestToken(data["oauth_token"], data["oauth_token_secret"])

    def authorization_url(self, request_token: RequestToken) -> str:
        """URL the user agent must visit to approve the request token."""
        oauth = self._session_factory(
            self.credentials.consumer_key,
            client_secret=self.credentials.consumer_secret,
        )
        return oauth.authorization_url(
            self.authorize_url, request_token=request_token.token
        )

    def request_access_token(
        self, token: str, verifier: str, token_secret: str
    ) -> AccessToken:
        """Exchange an approved request token and its verifier.

        Every failure, network errors included, is an AuthFailure: the
        request token cannot be reused afterwards.
        """
        oauth = self._session_factory(
            self.credentials.consumer_key,
            client_secret=self.credentials.consumer_secret,
            resource_owner_key=token,
            resource_owner_secret=token_secret,
            verifier=verifier,
        )
        try:
            data = oauth.fetch_access_token(
                self.access_token_url, timeout=Config.REQUEST_TIMEOUT
            )
        except TokenRequestDenied as e:
            logger.error(f"Access token denied ({e.status_code}): {e}")
            raise AuthFailure(
                "Provider rejected the verifier",
                http_code=e.status_code,
                provider_message=str(e),
            ) from e
        except requests.RequestException as e:
            logger.error(f"Access token call failed: {e}")
            raise AuthFailure(f"Access token call failed: {e}") from e
        except ValueError as e:
            logger.error(f"Unusable access token response: {e}")
            raise AuthFailure(f"Unusable access token response: {e}") from e

        return AccessToken(data["oauth_token"], data["oauth_token_secret"])
