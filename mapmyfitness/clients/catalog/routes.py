"""Route endpoints.

Most route calls identify the route by ``route_id``, ``route_key`` or the
deprecated 32 character key ``r``; pass whichever one you have.
"""

from mapmyfitness.clients.base import BaseClient


def _route(route_id=None, route_key=None, r=None):
    return {"route_id": route_id, "route_key": route_key, "r": r}


class RouteEndpoints(BaseClient):

    def copy_route(self, route_id=None, route_key=None, r=None):
        """Create a private copy of a route in the authorized user's profile."""
        return self._call("routes/copy_route", _route(route_id, route_key, r))

    def create_route(self, route_name, route_type_id, total_distance, route_data,
                     additional_options=None):
        """Create a route.

        Args:
            route_type_id: See ``get_route_types``.
            total_distance: Total distance in miles.
            route_data: ``lng1,lat1,[marker_id],[timestamp],[notes]|lng2,...``
        """
        return self._call("routes/create_route", {
            "route_name": route_name,
            "route_type_id": route_type_id,
            "total_distance": total_distance,
            "route_data": route_data,
        }, additional_options)

    def delete_route(self, route_id=None, route_key=None, r=None):
        return self._call("routes/delete_route", _route(route_id, route_key, r))

    def get_point_elevation(self, latitude, longitude):
        return self._call("routes/get_point_elevation", {
            "latitude": latitude,
            "longitude": longitude,
        })

    def get_route(self, route_id=None, route_key=None, created_date=None,
                  activity_type=None, old_json=None, loc=None, r=None):
        return self._call("routes/get_route", {
            **_route(route_id, route_key, r),
            "created_date": created_date,
            "activity_type": activity_type,
            "old_json": old_json,
            "loc": loc,
        })

    def get_route_climb_data(self, route_id=None, route_key=None):
        return self._call("routes/get_route_climb_data", _route(route_id, route_key))

    def get_route_crs(self, seconds_per_mile, route_key=None, file_extension=None, r=None):
        """Course file of a route paced at ``seconds_per_mile``."""
        return self._call("routes/get_route_crs", {
            "seconds_per_mile": seconds_per_mile,
            "route_key": route_key,
            "file_extension": file_extension,
            "r": r,
        })

    def get_route_distances(self, route_id=None, route_key=None, created_date=None,
                            activity_type=None, old_json=None, loc=None, r=None):
        return self._call("routes/get_route_distances", {
            **_route(route_id, route_key, r),
            "created_date": created_date,
            "activity_type": activity_type,
            "old_json": old_json,
            "loc": loc,
        })

    def get_route_elevation_summary(self, route_id=None, route_key=None):
        return self._call("routes/get_route_elevation_summary", _route(route_id, route_key))

    def get_route_gpx(self, route_id=None, route_key=None, elevation_flag=None, r=None):
        return self._call("routes/get_route_gpx", {
            **_route(route_id, route_key, r),
            "elevation_flag": elevation_flag,
        })

    def get_route_json(self, route_key=None, r=None):
        return self._call("routes/get_route_json", {"route_key": route_key, "r": r})

    def get_route_kml(self, route_key=None, r=None, additional_options=None):
        return self._call("routes/get_route_kml", {"route_key": route_key, "r": r},
                          additional_options)

    def get_route_kml_tour(self, route_key=None, r=None, additional_options=None):
        return self._call("routes/get_route_kml_tour", {"route_key": route_key, "r": r},
                          additional_options)

    def get_route_points_csv(self, user_id=None, user_key=None, additional_options=None):
        return self._call("routes/get_route_points_csv", self._user(user_id, user_key),
                          additional_options)

    def get_route_points_kml(self, user_id=None, user_key=None, additional_options=None):
        return self._call("routes/get_route_points_kml", self._user(user_id, user_key),
                          additional_options)

    def get_route_start_locations(self, user_id=None, user_key=None, route_type_id=None,
                                  limit=None):
        return self._call("routes/get_route_start_locations", {
            **self._user(user_id, user_key),
            "route_type_id": route_type_id,
            "limit": limit,
        })

    def get_route_types(self):
        return self._call("routes/get_route_types")

    def get_routes(self, user_id=None, user_key=None, additional_options=None):
        """Routes of a user, the effective user by default."""
        return self._call("routes/get_routes", self._user(user_id, user_key),
                          additional_options)

    def import_route(self, file, test):
        return self._call("routes/import_route", {"file": file, "test": test})

    def save_route(self, route_name, route_type_id, total_distance, route_data,
                   additional_options=None):
        """Save (create or edit) a route record."""
        return self._call("routes/save_route", {
            "route_name": route_name,
            "route_type_id": route_type_id,
            "total_distance": total_distance,
            "route_data": route_data,
        }, additional_options)

    def save_route2(self, route_name, route_type_id, city, country, total_distance,
                    route_data, additional_options=None):
        return self._call("routes/save_route2", {
            "route_name": route_name,
            "route_type_id": route_type_id,
            "city": city,
            "country": country,
            "total_distance": total_distance,
            "route_data": route_data,
        }, additional_options)

    def search_routes(self, user_id=None, user_key=None, additional_options=None):
        return self._call("routes/search_routes", self._user(user_id, user_key),
                          additional_options)

    def share_route(self, email_address_list, route_id=None, route_key=None, r=None,
                    additional_options=None):
        return self._call("routes/share_route", {
            "email_address_list": email_address_list,
            **_route(route_id, route_key, r),
        }, additional_options)

    def view_marker_image(self, marker_type_id, txt, mode):
        return self._call("routes/view_marker_image", {
            "marker_type_id": marker_type_id,
            "txt": txt,
            "mode": mode,
        })

    def view_route_elevation(self, route_id=None, route_key=None, r=None,
                             additional_options=None):
        return self._call("routes/view_route_elevation", _route(route_id, route_key, r),
                          additional_options)

    def view_route_image(self, route_id=None, route_key=None, r=None,
                         additional_options=None):
        return self._call("routes/view_route_image", _route(route_id, route_key, r),
                          additional_options)
