"""Gear endpoints."""

from mapmyfitness.clients.base import BaseClient


class GearEndpoints(BaseClient):

    def create_gear(self, gear_name, gear_type_id, purchase_date, additional_options=None):
        return self._call("gear/create_gear", {
            "gear_name": gear_name,
            "gear_type_id": gear_type_id,
            "purchase_date": purchase_date,
        }, additional_options)

    def create_gear_brand(self, gear_brand_name, gear_type_id):
        return self._call("gear/create_gear_brand", {
            "gear_brand_name": gear_brand_name,
            "gear_type_id": gear_type_id,
        })

    def create_gear_type(self, gear_type_name, replacement_distance=0):
        """Create a gear type; ``replacement_distance`` is in miles."""
        return self._call("gear/create_gear_type", {
            "gear_type_name": gear_type_name,
            "replacement_distance": replacement_distance,
        })

    def delete_gear(self, gear_id=None, gear_key=None):
        return self._call("gear/delete_gear", {"gear_id": gear_id, "gear_key": gear_key})

    def get_gear(self, gear_id=None, gear_key=None):
        return self._call("gear/get_gear", {"gear_id": gear_id, "gear_key": gear_key})

    def get_gear_options(self, gear_type_id):
        return self._call("gear/get_gear_options", {"gear_type_id": gear_type_id})

    def get_gear_type_options(self):
        return self._call("gear/get_gear_type_options")

    def get_user_gear(self, gear_type_id=None):
        return self._call("gear/get_user_gear", {"gear_type_id": gear_type_id})

    def is_duplicate_gear_brand_name(self, gear_brand_name):
        return self._call("gear/is_duplicate_gear_brand_name", {
            "gear_brand_name": gear_brand_name,
        })

    def suggest_gear_brands(self, gear_type_id, q):
        """Brand suggestions for a gear type matching the query ``q``."""
        return self._call("gear/suggest_gear_brands", {
            "gear_type_id": gear_type_id,
            "q": q,
        })
