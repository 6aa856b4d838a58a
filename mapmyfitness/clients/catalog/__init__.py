from mapmyfitness.clients.catalog.activity_feed import ActivityFeedEndpoints
from mapmyfitness.clients.catalog.events import EventEndpoints
from mapmyfitness.clients.catalog.gear import GearEndpoints
from mapmyfitness.clients.catalog.groups import GroupEndpoints
from mapmyfitness.clients.catalog.routes import RouteEndpoints
from mapmyfitness.clients.catalog.users import UserEndpoints
from mapmyfitness.clients.catalog.workouts import WorkoutEndpoints

__all__ = [
    'ActivityFeedEndpoints',
    'EventEndpoints',
    'GearEndpoints',
    'GroupEndpoints',
    'RouteEndpoints',
    'UserEndpoints',
    'WorkoutEndpoints',
]
