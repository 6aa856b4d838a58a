from mapmyfitness.services.token_storage import (
    TokenStorage,
    MemoryTokenStorage,
    SessionTokenStorage,
    DatabaseTokenStorage,
)
from mapmyfitness.services.session import SessionController, SessionState

__all__ = [
    'TokenStorage',
    'MemoryTokenStorage',
    'SessionTokenStorage',
    'DatabaseTokenStorage',
    'SessionController',
    'SessionState',
]
