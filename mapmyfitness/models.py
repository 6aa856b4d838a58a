"""Value types shared across the client."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from mapmyfitness.exceptions import ConfigurationError


class ResponseFormat(str, Enum):
    """Body formats the API can answer with (the ``o`` parameter)."""

    JSON = "json"
    XML = "xml"
    PHP = "php"
    TXT = "txt"

    @classmethod
    def parse(cls, value) -> "ResponseFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(f"'{f.value}'" for f in cls)
            raise ConfigurationError(
                f"Response format must be one of {allowed}, got {value!r}"
            ) from None


@dataclass(frozen=True)
class Credentials:
    consumer_key: str
    consumer_secret: str
    callback_url: Optional[str] = None


@dataclass(frozen=True)
class RequestToken:
    token: str
    token_secret: str


@dataclass(frozen=True)
class AccessToken:
    token: str
    token_secret: str


@dataclass
class Response:
    """Body and HTTP status of a single API call."""

    body: Any
    code: int

    @property
    def ok(self) -> bool:
        return self.code < 400
