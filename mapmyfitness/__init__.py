"""MapMyFitness API client with OAuth 1.0a session handling."""

from mapmyfitness.clients.api import MapMyFitnessClient
from mapmyfitness.exceptions import (
    ApiError,
    AuthFailure,
    AuthRequired,
    ConfigurationError,
    MalformedResponse,
    MapMyFitnessError,
    SecretDecryptionError,
    TokenNotFound,
    TransportFailure,
)
from mapmyfitness.models import AccessToken, Credentials, RequestToken, Response, ResponseFormat
from mapmyfitness.services.session import AccessGranted, Redirect, SessionState

__all__ = [
    'MapMyFitnessClient',
    'ApiError',
    'AuthFailure',
    'AuthRequired',
    'ConfigurationError',
    'MalformedResponse',
    'MapMyFitnessError',
    'SecretDecryptionError',
    'TokenNotFound',
    'TransportFailure',
    'AccessToken',
    'Credentials',
    'RequestToken',
    'Response',
    'ResponseFormat',
    'AccessGranted',
    'Redirect',
    'SessionState',
]
