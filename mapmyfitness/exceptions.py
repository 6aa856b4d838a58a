"""Exceptions raised by the MapMyFitness client."""

from typing import Optional


class MapMyFitnessError(Exception):
    """Base class for all client errors.

    Args:
        message: Human readable description.
        http_code: HTTP status returned by the provider, when there was one.
        provider_message: Error text reported by the provider itself.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        http_code: Optional[int] = None,
        provider_message: Optional[str] = None,
    ):
        if message is None:
            message = provider_message or ""
        super().__init__(message)
        self.http_code = http_code
        self.provider_message = provider_message


class ConfigurationError(MapMyFitnessError):
    """Client constructed with invalid settings."""


class AuthRequired(MapMyFitnessError):
    """Signed call attempted without an access token."""


class AuthFailure(MapMyFitnessError):
    """Provider rejected a handshake step."""


class TransportFailure(MapMyFitnessError):
    """Network or HTTP level failure."""


class ApiError(TransportFailure):
    """Endpoint answered with an HTTP error status."""


class MalformedResponse(MapMyFitnessError):
    """Response body could not be decoded in the configured format."""


class TokenNotFound(MapMyFitnessError):
    """Requested token is not present in token storage."""


class SecretDecryptionError(MapMyFitnessError):
    """Stored token secret cannot be decrypted with the configured key."""
