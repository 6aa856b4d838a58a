"""User, friend and message endpoints."""

from mapmyfitness.clients.base import BaseClient


class UserEndpoints(BaseClient):

    # Friends

    def add_friend(self, friend_user_key=None, friend_user_id=None, friend_email=None,
                   source=None):
        return self._call("users/add_friend", {
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
            "friend_email": friend_email,
            "source": source,
        })

    def add_friend_to_friend_list(self, friend_user_key=None, friend_user_id=None,
                                  friend_key=None, friend_id=None, friend_list_id=None,
                                  friend_list_key=None):
        return self._call("users/add_friend_to_friend_list", {
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
            "friend_key": friend_key,
            "friend_id": friend_id,
            "friend_list_id": friend_list_id,
            "friend_list_key": friend_list_key,
        })

    def create_friend_list(self, friend_list_name, friend_list_description=None):
        return self._call("users/create_friend_list", {
            "friend_list_name": friend_list_name,
            "friend_list_description": friend_list_description,
        })

    def delete_friend_list(self, friend_list_id=None, friend_list_key=None):
        return self._call("users/delete_friend_list", {
            "friend_list_id": friend_list_id,
            "friend_list_key": friend_list_key,
        })

    def get_user_friend_list(self):
        return self._call("users/get_user_friend_list")

    def get_user_friend_list_options(self):
        return self._call("users/get_user_friend_list_options")

    def get_user_friend_requests(self, status=None):
        return self._call("users/get_user_friend_requests", {"status": status})

    def get_user_friends(self, friend_list_id=None, friend_list_key=None,
                         additional_options=None):
        return self._call("users/get_user_friends", {
            "friend_list_id": friend_list_id,
            "friend_list_key": friend_list_key,
        }, additional_options)

    def process_friend_requests(self, process_request, friend_user_key=None,
                                friend_user_id=None):
        """Accept or deny pending friend requests."""
        return self._call("users/process_friend_requests", {
            "process_request": process_request,
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
        })

    def remove_friend(self, friend_user_key=None, friend_user_id=None, friend_id=None):
        return self._call("users/remove_friend", {
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
            "friend_id": friend_id,
        })

    def remove_friend_from_friend_list(self, friend_user_key=None, friend_user_id=None,
                                       additional_options=None):
        return self._call("users/remove_friend_from_friend_list", {
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
        }, additional_options)

    def send_friend_request(self, friend_user_key=None, friend_user_id=None, message=None,
                            product=None):
        return self._call("users/send_friend_request", {
            "friend_user_key": friend_user_key,
            "friend_user_id": friend_user_id,
            "message": message,
            "product": product,
        })

    def update_friend_list(self, friend_list_name, friend_list_id=None,
                           friend_list_key=None, friend_list_description=None):
        return self._call("users/update_friend_list", {
            "friend_list_name": friend_list_name,
            "friend_list_id": friend_list_id,
            "friend_list_key": friend_list_key,
            "friend_list_description": friend_list_description,
        })

    # Remote (partner) accounts

    def associate_remote_user(self, remote_user_type_id, remote_id, additional_options=None):
        return self._call("users/associate_remote_user", {
            "remote_user_type_id": remote_user_type_id,
            "remote_id": remote_id,
        }, additional_options)

    def create_remote_user(self, remote_user_type_id, remote_id, first_name, username,
                           email, password, promo_opt_out_flag, additional_options=None):
        return self._call("users/create_remote_user", {
            "remote_user_type_id": remote_user_type_id,
            "remote_id": remote_id,
            "first_name": first_name,
            "username": username,
            "email": email,
            "password": password,
            "promo_opt_out_flag": promo_opt_out_flag,
        }, additional_options)

    def delete_remote_user(self, remote_user_type_id):
        return self._call("users/delete_remote_user", {
            "remote_user_type_id": remote_user_type_id,
        })

    def get_remote_user_types(self):
        return self._call("users/get_remote_user_types")

    def is_remote_user(self, remote_user_type_id, remote_id):
        return self._call("users/is_remote_user", {
            "remote_user_type_id": remote_user_type_id,
            "remote_id": remote_id,
        })

    # Accounts

    def authenticate_user(self):
        return self._call("users/authenticate_user")

    def check_bb_auth(self):
        return self._call("users/check_bb_auth")

    def create_user(self, first_name, username, email, password, promo_opt_out_flag,
                    additional_options=None):
        return self._call("users/create_user", {
            "first_name": first_name,
            "username": username,
            "email": email,
            "password": password,
            "promo_opt_out_flag": promo_opt_out_flag,
        }, additional_options)

    def get_avatar(self, size=None, uid=None):
        return self._call("users/get_avatar", {"size": size, "uid": uid})

    def get_user(self, user_id=None, user_key=None):
        """Profile of a user, the effective user by default."""
        return self._call("users/get_user", self._user(user_id, user_key))

    def get_user_contacts(self, username, domain, password):
        """Import address book contacts from a webmail account."""
        return self._call("users/get_user_contacts", {
            "username": username,
            "domain": domain,
            "password": password,
        })

    def get_user_keys(self, email):
        return self._call("users/get_user_keys", {"email": email})

    def get_user_locations(self, minutes=None, site_id=None):
        return self._call("users/get_user_locations", {"minutes": minutes, "site_id": site_id})

    def is_duplicate_email(self, email=None, txt_email=None):
        return self._call("users/is_duplicate_email", {"email": email, "txtEmail": txt_email})

    def is_duplicate_username(self, username=None, txt_username=None):
        return self._call("users/is_duplicate_username", {
            "username": username,
            "txtUsername": txt_username,
        })

    def is_premium_user(self):
        return self._call("users/is_premium_user")

    def is_valid_user(self, email_list=None):
        return self._call("users/is_valid_user", {"email_list": email_list})

    def login(self, u=None, p=None, user_key=None, logout=None):
        """Legacy username/password login of the API itself."""
        return self._call("users/login", {"u": u, "p": p, "user_key": user_key, "logout": logout})

    def search_users(self, keyword=None, additional_options=None):
        return self._call("users/search_users", {"keyword": keyword}, additional_options)

    def update_user(self, user_id=None, user_key=None, additional_options=None):
        return self._call("users/update_user", self._user(user_id, user_key),
                          additional_options)

    def update_user_map_settings(self, map_settings):
        return self._call("users/update_user_map_settings", {"map_settings": map_settings})

    def user_owns_content(self, content_id, content_type_id):
        return self._call("users/user_owns_content", {
            "content_id": content_id,
            "content_type_id": content_type_id,
        })

    # Stats

    def get_fundraising_stats(self, user_id=None, user_key=None, campaign_id=None):
        return self._call("users/get_fundraising_stats", {
            **self._user(user_id, user_key),
            "campaign_id": campaign_id,
        })

    def get_user_stats(self, user_id=None, user_key=None, parent_workout_type_ids=None,
                       date_from=None, date_to=None, period=None):
        """Aggregated workout stats of a user.

        Args:
            parent_workout_type_ids: List of parent workout type ids.
            date_from: ``date`` of the first day included.
            date_to: ``date`` of the last day included.
            period: Grouping period, e.g. ``week`` or ``month``.
        """
        return self._call("users/get_user_stats", {
            **self._user(user_id, user_key),
            "parent_workout_type_ids": parent_workout_type_ids,
            "date_from": date_from,
            "date_to": date_to,
            "period": period,
        })

    def get_user_summary(self, user_id=None, user_key=None, fundraising=None):
        return self._call("users/get_user_summary", {
            **self._user(user_id, user_key),
            "fundraising": fundraising,
        })

    def user_summary(self, fundraising=None):
        return self._call("users/user_summary", {"fundraising": fundraising})

    # Messages and invitations

    def get_message(self, message_key=None, message_id=None):
        return self._call("users/get_message", {
            "message_key": message_key,
            "message_id": message_id,
        })

    def get_user_messages(self, status=None, start_record=None, limit=None, sort_by=None):
        return self._call("users/get_user_messages", {
            "status": status,
            "start_record": start_record,
            "limit": limit,
            "sort_by": sort_by,
        })

    def invite(self, email_list, product, message, site_name=None):
        return self._call("users/invite", {
            "email_list": email_list,
            "product": product,
            "site_name": site_name,
            "message": message,
        })

    def send_message(self, subject, message, user_key=None, user_id=None):
        return self._call("users/send_message", {
            "subject": subject,
            "message": message,
            "user_key": user_key,
            "user_id": user_id,
        })

    def tell_friend_content(self, product, site_name=None):
        return self._call("users/tell_friend_content", {
            "product": product,
            "site_name": site_name,
        })
