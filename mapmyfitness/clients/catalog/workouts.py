"""Workout endpoints."""

from mapmyfitness.clients.base import BaseClient


def _workout(workout_id=None, workout_key=None):
    return {"workout_id": workout_id, "workout_key": workout_key}


class WorkoutEndpoints(BaseClient):

    def add_time_series(self, data, workout_id=None):
        """Attach time series samples to a workout."""
        return self._call("workouts/add_time_series", {"data": data, "workout_id": workout_id})

    def convert_isds_to_workout_track(self, lap_interval, workout_id=None, workout_key=None):
        return self._call("workouts/convert_isds_to_workout_track", {
            "lap_interval": lap_interval,
            **_workout(workout_id, workout_key),
        })

    def convert_route_to_workout_track(self, lap_interval, workout_id=None, workout_key=None):
        return self._call("workouts/convert_route_to_workout_track", {
            "lap_interval": lap_interval,
            **_workout(workout_id, workout_key),
        })

    def create_workout(self, workout_date, workout_description, additional_options=None):
        """Create a workout.

        Args:
            workout_date: ``date`` of the workout.
            workout_description: Free text description.
            additional_options: Extra fields such as ``workout_type_id`` or
                ``time_taken``.
        """
        return self._call("workouts/create_workout", {
            "workout_date": workout_date,
            "workout_description": workout_description,
        }, additional_options)

    def create_workout_track(self, workout_id, workout_track_name, seconds,
                             additional_options=None):
        return self._call("workouts/create_workout_track", {
            "workout_id": workout_id,
            "workout_track_name": workout_track_name,
            "seconds": seconds,
        }, additional_options)

    def create_workout_type(self, workout_type_name, parent_workout_type_id,
                            additional_options=None):
        return self._call("workouts/create_workout_type", {
            "workout_type_name": workout_type_name,
            "parent_workout_type_id": parent_workout_type_id,
        }, additional_options)

    def delete_workout(self, workout_id=None, workout_key=None):
        return self._call("workouts/delete_workout", _workout(workout_id, workout_key))

    def edit_workout(self, workout_id=None, workout_key=None, additional_options=None):
        return self._call("workouts/edit_workout", _workout(workout_id, workout_key),
                          additional_options)

    def get_activity_types(self, parent_activity_type_id=None):
        return self._call("workouts/get_activity_types", {
            "parent_activity_type_id": parent_activity_type_id,
        })

    def get_compendium_compcodes(self, heading):
        return self._call("workouts/get_compendium_compcodes", {"heading": heading})

    def get_compendium_headings(self):
        return self._call("workouts/get_compendium_headings")

    def get_parent_workout_types(self):
        return self._call("workouts/get_parent_workout_types")

    def get_tcx_stats(self, session_id, activity_index=None):
        return self._call("workouts/get_tcx_stats", {
            "session_id": session_id,
            "activity_index": activity_index,
        })

    def get_user_workout_stats(self, user_id=None, user_key=None, additional_options=None):
        return self._call("workouts/get_user_workout_stats", self._user(user_id, user_key),
                          additional_options)

    def get_workout(self, workout_id=None, workout_key=None):
        return self._call("workouts/get_workout", _workout(workout_id, workout_key))

    def get_workout_full(self, workout_id=None, workout_key=None):
        """Workout with its time series and laps."""
        return self._call("workouts/get_workout_full", _workout(workout_id, workout_key))

    def get_workout_laps(self, workout_id=None, workout_key=None):
        return self._call("workouts/get_workout_laps", _workout(workout_id, workout_key))

    def get_workout_types(self, parent_workout_type_id, user_id=None):
        return self._call("workouts/get_workout_types", {
            "user_id": self._user(user_id)["user_id"],
            "parent_workout_type_id": parent_workout_type_id,
        })

    def get_workouts(self, user_id=None, user_key=None, additional_options=None):
        """Workouts of a user, the effective user by default."""
        return self._call("workouts/get_workouts", self._user(user_id, user_key),
                          additional_options)

    def import_tcx(self, u=None, p=None, tcx=None, additional_options=None):
        return self._call("workouts/import_tcx", {"u": u, "p": p, "tcx": tcx},
                          additional_options)

    def save_workout_data_track(self, workout_track_name, workout_id=None, workout_key=None,
                                additional_options=None):
        return self._call("workouts/save_workout_data_track", {
            "workout_track_name": workout_track_name,
            **_workout(workout_id, workout_key),
        }, additional_options)

    def search_workouts(self, keyword=None, additional_options=None):
        return self._call("workouts/search_workouts", {"keyword": keyword}, additional_options)

    def suggest_workout_types(self, parent_workout_type_id=None, additional_options=None):
        return self._call("workouts/suggest_workout_types", {
            "parent_workout_type_id": parent_workout_type_id,
        }, additional_options)
