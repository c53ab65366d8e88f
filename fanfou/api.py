"""
Endpoint methods shared by the blocking and the async client.

Each method forwards its keyword arguments to ``self.call`` together with its
endpoint table entry, so the blocking client returns a ``Response`` and the
async client returns an awaitable of one.
"""
from abc import ABC, abstractmethod

from .endpoints import ENDPOINTS


class API(ABC):
    """One method per Fanfou API endpoint."""

    @abstractmethod
    def call(self, endpoint, **params):
        """Send one call to ``endpoint`` and return its ``Response``."""

    # search

    def search_public_timeline(self, **params):
        """Search the public timeline. Requires ``q``."""
        return self.call(ENDPOINTS['search_public_timeline'], **params)

    def search_users(self, **params):
        """Search users by keyword. Requires ``q``."""
        return self.call(ENDPOINTS['search_users'], **params)

    def search_user_timeline(self, **params):
        return self.call(ENDPOINTS['search_user_timeline'], **params)

    # blocks

    def blocks_ids(self, **params):
        return self.call(ENDPOINTS['blocks_ids'], **params)

    def blocks_blocking(self, **params):
        return self.call(ENDPOINTS['blocks_blocking'], **params)

    def blocks_create(self, **params):
        return self.call(ENDPOINTS['blocks_create'], **params)

    def blocks_exists(self, **params):
        return self.call(ENDPOINTS['blocks_exists'], **params)

    def blocks_destroy(self, **params):
        return self.call(ENDPOINTS['blocks_destroy'], **params)

    # users

    def users_tag_list(self, **params):
        return self.call(ENDPOINTS['users_tag_list'], **params)

    def users_followers(self, **params):
        return self.call(ENDPOINTS['users_followers'], **params)

    def users_recommendation(self, **params):
        return self.call(ENDPOINTS['users_recommendation'], **params)

    def users_cancel_recommendation(self, **params):
        return self.call(ENDPOINTS['users_cancel_recommendation'], **params)

    def users_show(self, **params):
        return self.call(ENDPOINTS['users_show'], **params)

    def users_friends(self, **params):
        return self.call(ENDPOINTS['users_friends'], **params)

    # account

    def account_verify_credentials(self, **params):
        return self.call(ENDPOINTS['account_verify_credentials'], **params)

    def account_update_profile_image(self, **params):
        """Replace the profile image. ``image`` is a file path or binary file object."""
        return self.call(ENDPOINTS['account_update_profile_image'], **params)

    def account_rate_limit_status(self, **params):
        return self.call(ENDPOINTS['account_rate_limit_status'], **params)

    def account_update_profile(self, **params):
        return self.call(ENDPOINTS['account_update_profile'], **params)

    def account_notification(self, **params):
        return self.call(ENDPOINTS['account_notification'], **params)

    # saved searches

    def saved_searches_create(self, **params):
        return self.call(ENDPOINTS['saved_searches_create'], **params)

    def saved_searches_destroy(self, **params):
        return self.call(ENDPOINTS['saved_searches_destroy'], **params)

    def saved_searches_show(self, **params):
        return self.call(ENDPOINTS['saved_searches_show'], **params)

    def saved_searches_list(self, **params):
        return self.call(ENDPOINTS['saved_searches_list'], **params)

    # photos

    def photos_user_timeline(self, **params):
        return self.call(ENDPOINTS['photos_user_timeline'], **params)

    def photos_upload(self, **params):
        """Post a status with a photo.

        ``photo`` is a file path or binary file object; ``status`` is the
        optional accompanying text.
        """
        return self.call(ENDPOINTS['photos_upload'], **params)

    # trends

    def trends_list(self, **params):
        return self.call(ENDPOINTS['trends_list'], **params)

    # followers

    def followers_ids(self, **params):
        return self.call(ENDPOINTS['followers_ids'], **params)

    # favorites

    def favorites_destroy(self, **params):
        return self.call(ENDPOINTS['favorites_destroy'], **params)

    def favorites_list(self, **params):
        return self.call(ENDPOINTS['favorites_list'], **params)

    def favorites_create(self, **params):
        return self.call(ENDPOINTS['favorites_create'], **params)

    # friendships

    def friendships_create(self, **params):
        return self.call(ENDPOINTS['friendships_create'], **params)

    def friendships_destroy(self, **params):
        return self.call(ENDPOINTS['friendships_destroy'], **params)

    def friendships_requests(self, **params):
        return self.call(ENDPOINTS['friendships_requests'], **params)

    def friendships_deny(self, **params):
        return self.call(ENDPOINTS['friendships_deny'], **params)

    def friendships_exists(self, **params):
        """Whether ``user_a`` follows ``user_b``.

        The data is ``False`` (not ``None``) when the call fails; check
        ``error`` to tell a failure from a negative answer.
        """
        return self.call(ENDPOINTS['friendships_exists'], **params)

    def friendships_accept(self, **params):
        return self.call(ENDPOINTS['friendships_accept'], **params)

    def friendships_show(self, **params):
        return self.call(ENDPOINTS['friendships_show'], **params)

    # friends

    def friends_ids(self, **params):
        return self.call(ENDPOINTS['friends_ids'], **params)

    # statuses

    def statuses_destroy(self, **params):
        return self.call(ENDPOINTS['statuses_destroy'], **params)

    def statuses_home_timeline(self, **params):
        return self.call(ENDPOINTS['statuses_home_timeline'], **params)

    def statuses_public_timeline(self, **params):
        return self.call(ENDPOINTS['statuses_public_timeline'], **params)

    def statuses_replies(self, **params):
        return self.call(ENDPOINTS['statuses_replies'], **params)

    def statuses_followers(self, **params):
        return self.call(ENDPOINTS['statuses_followers'], **params)

    def statuses_update(self, **params):
        """Post a status. Requires ``status`` (at most 140 characters)."""
        return self.call(ENDPOINTS['statuses_update'], **params)

    def statuses_user_timeline(self, **params):
        return self.call(ENDPOINTS['statuses_user_timeline'], **params)

    def statuses_friends(self, **params):
        return self.call(ENDPOINTS['statuses_friends'], **params)

    def statuses_context_timeline(self, **params):
        return self.call(ENDPOINTS['statuses_context_timeline'], **params)

    def statuses_mentions(self, **params):
        return self.call(ENDPOINTS['statuses_mentions'], **params)

    def statuses_show(self, **params):
        return self.call(ENDPOINTS['statuses_show'], **params)

    # direct messages

    def direct_messages_destroy(self, **params):
        return self.call(ENDPOINTS['direct_messages_destroy'], **params)

    def direct_messages_conversation(self, **params):
        return self.call(ENDPOINTS['direct_messages_conversation'], **params)

    def direct_messages_new(self, **params):
        """Send a direct message. Requires ``user`` and ``text``."""
        return self.call(ENDPOINTS['direct_messages_new'], **params)

    def direct_messages_conversation_list(self, **params):
        return self.call(ENDPOINTS['direct_messages_conversation_list'], **params)

    def direct_messages_inbox(self, **params):
        return self.call(ENDPOINTS['direct_messages_inbox'], **params)

    def direct_messages_sent(self, **params):
        return self.call(ENDPOINTS['direct_messages_sent'], **params)
