"""Group endpoints."""

from mapmyfitness.clients.base import BaseClient


class GroupEndpoints(BaseClient):

    def _group(self, path, group_id, group_key):
        return self._call(path, {"group_id": group_id, "group_key": group_key})

    def delete_group(self, group_id=None, group_key=None):
        return self._group("groups/delete_group", group_id, group_key)

    def get_group(self, group_id=None, group_key=None):
        return self._group("groups/get_group", group_id, group_key)

    def get_group_stats(self, group_id=None, group_key=None):
        return self._group("groups/get_group_stats", group_id, group_key)

    def get_group_types(self):
        return self._call("groups/get_group_types")

    def join_group(self, group_id=None, group_key=None):
        return self._group("groups/join_group", group_id, group_key)

    def leave_group(self, group_id=None, group_key=None):
        return self._group("groups/leave_group", group_id, group_key)

    def update_group(self, group_name, public_flag, group_contact_person, web_site,
                     additional_options=None):
        return self._call("groups/update_group", {
            "group_name": group_name,
            "public_flag": public_flag,
            "group_contact_person": group_contact_person,
            "web_site": web_site,
        }, additional_options)
