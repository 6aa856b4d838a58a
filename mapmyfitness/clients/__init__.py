from mapmyfitness.clients.base import BaseClient
from mapmyfitness.clients.executor import RequestExecutor
from mapmyfitness.clients.provider import OAuthProvider
from mapmyfitness.clients.api import MapMyFitnessClient

__all__ = ['BaseClient', 'RequestExecutor', 'OAuthProvider', 'MapMyFitnessClient']
