"""Base client interface for the MapMyFitness endpoint catalog."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

CURRENT_USER = "-"


class BaseClient(ABC):
    """Abstract base class shared by the endpoint catalog mixins.

    Catalog methods only build parameter mappings; subclasses provide
    ``_fetch`` which signs, sends and decodes the call.
    """

    def __init__(self):
        self.user_id = CURRENT_USER

    @abstractmethod
    def _fetch(self, path: str, parameters: Dict[str, Any]) -> Any:
        """Call an endpoint with the given parameters and decode the body."""
        pass

    def set_user(self, user_id) -> None:
        """Set the user targeted by endpoints that take an optional user."""
        self.user_id = str(user_id) if user_id is not None else CURRENT_USER

    def _call(
        self,
        path: str,
        parameters: Optional[Mapping[str, Any]] = None,
        additional_options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        params = dict(parameters or {})
        if additional_options:
            params.update(additional_options)
        return self._fetch(path, params)

    def _user(self, user_id=None, user_key=None) -> Dict[str, Any]:
        """user_id/user_key pair, defaulting to the effective user."""
        if user_id is None and user_key is None and self.user_id != CURRENT_USER:
            user_id = self.user_id
        return {"user_id": user_id, "user_key": user_key}
