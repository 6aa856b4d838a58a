"""Activity feed and generic resource endpoints."""

from mapmyfitness.clients.base import BaseClient


class ActivityFeedEndpoints(BaseClient):

    def get_activity_feed(self, user_id=None, user_key=None, date_since=None,
                          scope=None, start_record=None, limit=None, sort_by=None):
        """Get the activity feed of a user.

        Args:
            date_since: ``date`` of the oldest entry to return.
            scope: Feed scope, e.g. ``user`` or ``friends``.
        """
        return self._call("activity_feed/get_activity_feed", {
            **self._user(user_id, user_key),
            "date_since": date_since,
            "scope": scope,
            "start_record": start_record,
            "limit": limit,
            "sort_by": sort_by,
        })

    def get_resource(self, parameters):
        """Fetch a resource record; ``parameters`` are passed through."""
        return self._call("resource/get_resource", parameters)
