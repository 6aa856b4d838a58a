"""Event endpoints."""

from mapmyfitness.clients.base import BaseClient


class EventEndpoints(BaseClient):

    def create_event(self, event_title, event_start_date, event_type_id_list,
                     event_creator_type, event_city, event_country,
                     event_brief_description, additional_options=None):
        """Create an event.

        Args:
            event_start_date: ``date`` the event starts.
            event_type_id_list: Event type ids sharing the same parent type
                (see ``get_event_types``).
            event_country: Two letter country code.
        """
        return self._call("events/create_event", {
            "event_title": event_title,
            "event_start_date": event_start_date,
            "event_type_id_list": event_type_id_list,
            "event_creator_type": event_creator_type,
            "event_city": event_city,
            "event_country": event_country,
            "event_brief_description": event_brief_description,
        }, additional_options)

    def delete_event(self, event_key):
        return self._call("events/delete_event", {"event_key": event_key})

    def get_event(self, event_key):
        return self._call("events/get_event", {"event_key": event_key})

    def get_event_routes(self, event_key):
        """Routes attached to an event."""
        return self._call("events/get_event_routes", {"event_key": event_key})

    def get_event_types(self):
        return self._call("events/get_event_types")

    def publish_event(self, event_key):
        return self._call("events/publish_event", {"event_key": event_key})

    def search_events(self, additional_options=None):
        """Search events; filters go in ``additional_options``."""
        return self._call("events/search_events", None, additional_options)

    def unpublish_event(self, event_key):
        return self._call("events/unpublish_event", {"event_key": event_key})
