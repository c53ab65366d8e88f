"""
Endpoint table for the Fanfou REST API.

Every remote operation is one ``Endpoint`` entry; the client methods and the
response classifier are both driven by it.
"""
from typing import Any, Callable, Dict, NamedTuple, Tuple

from .models import (
    Conversation,
    DirectMessage,
    Notification,
    RateLimit,
    Relationship,
    SavedSearch,
    Status,
    Trends,
    User,
    decode_bool,
    decode_strings,
    decode_user_search,
    list_of,
)


class Endpoint(NamedTuple):
    """A single remote operation: HTTP verb, path and payload decoder.

    ``path`` is relative to the API base and may contain an ``{id}``
    placeholder, filled from the ``id`` parameter. ``failure_value`` is what
    the call returns as data when it fails; boolean endpoints use ``False``
    because their result has no absent state.
    """
    name: str
    method: str
    path: str
    decoder: Callable[[Any], Any]
    required: Tuple[str, ...] = ()
    files: Tuple[str, ...] = ()
    failure_value: Any = None


statuses = list_of(Status.from_dict)
users = list_of(User.from_dict)
messages = list_of(DirectMessage.from_dict)

_TABLE = [
    # search
    Endpoint('search_public_timeline', 'GET', 'search/public_timeline.json', statuses, required=('q',)),
    Endpoint('search_users', 'GET', 'search/users.json', decode_user_search, required=('q',)),
    Endpoint('search_user_timeline', 'GET', 'search/user_timeline.json', statuses, required=('q',)),

    # blocks
    Endpoint('blocks_ids', 'GET', 'blocks/ids.json', decode_strings),
    Endpoint('blocks_blocking', 'GET', 'blocks/blocking.json', users),
    Endpoint('blocks_create', 'POST', 'blocks/create.json', User.from_dict, required=('id',)),
    Endpoint('blocks_exists', 'GET', 'blocks/exists.json', User.from_dict, required=('id',)),
    Endpoint('blocks_destroy', 'POST', 'blocks/destroy.json', User.from_dict, required=('id',)),

    # users
    Endpoint('users_tag_list', 'GET', 'users/tag_list.json', decode_strings),
    Endpoint('users_followers', 'GET', 'users/followers.json', users),
    Endpoint('users_recommendation', 'GET', 'users/recommendation.json', users),
    Endpoint('users_cancel_recommendation', 'POST', 'users/cancel_recommendation.json', User.from_dict, required=('id',)),
    Endpoint('users_show', 'GET', 'users/show.json', User.from_dict),
    Endpoint('users_friends', 'GET', 'users/friends.json', users),

    # account
    Endpoint('account_verify_credentials', 'GET', 'account/verify_credentials.json', User.from_dict),
    Endpoint('account_update_profile_image', 'POST', 'account/update_profile_image.json', User.from_dict,
             required=('image',), files=('image',)),
    Endpoint('account_rate_limit_status', 'GET', 'account/rate_limit_status.json', RateLimit.from_dict),
    Endpoint('account_update_profile', 'POST', 'account/update_profile.json', User.from_dict),
    Endpoint('account_notification', 'GET', 'account/notification.json', Notification.from_dict),

    # saved searches
    Endpoint('saved_searches_create', 'POST', 'saved_searches/create.json', SavedSearch.from_dict, required=('query',)),
    Endpoint('saved_searches_destroy', 'POST', 'saved_searches/destroy.json', SavedSearch.from_dict, required=('id',)),
    Endpoint('saved_searches_show', 'GET', 'saved_searches/show.json', SavedSearch.from_dict, required=('id',)),
    Endpoint('saved_searches_list', 'GET', 'saved_searches/list.json', list_of(SavedSearch.from_dict)),

    # photos
    Endpoint('photos_user_timeline', 'GET', 'photos/user_timeline.json', statuses),
    Endpoint('photos_upload', 'POST', 'photos/upload.json', Status.from_dict, required=('photo',), files=('photo',)),

    # trends, followers
    Endpoint('trends_list', 'GET', 'trends/list.json', Trends.from_dict),
    Endpoint('followers_ids', 'GET', 'followers/ids.json', decode_strings),

    # favorites
    Endpoint('favorites_destroy', 'POST', 'favorites/destroy/{id}.json', Status.from_dict, required=('id',)),
    Endpoint('favorites_list', 'GET', 'favorites/id.json', statuses),
    Endpoint('favorites_create', 'POST', 'favorites/create/{id}.json', Status.from_dict, required=('id',)),

    # friendships
    Endpoint('friendships_create', 'POST', 'friendships/create.json', User.from_dict, required=('id',)),
    Endpoint('friendships_destroy', 'POST', 'friendships/destroy.json', User.from_dict, required=('id',)),
    Endpoint('friendships_requests', 'GET', 'friendships/requests.json', users),
    Endpoint('friendships_deny', 'POST', 'friendships/deny.json', User.from_dict, required=('id',)),
    Endpoint('friendships_exists', 'GET', 'friendships/exists.json', decode_bool,
             required=('user_a', 'user_b'), failure_value=False),
    Endpoint('friendships_accept', 'POST', 'friendships/accept.json', User.from_dict, required=('id',)),
    Endpoint('friendships_show', 'GET', 'friendships/show.json', Relationship.from_dict),

    # friends
    Endpoint('friends_ids', 'GET', 'friends/ids.json', decode_strings),

    # statuses
    Endpoint('statuses_destroy', 'POST', 'statuses/destroy.json', Status.from_dict, required=('id',)),
    Endpoint('statuses_home_timeline', 'GET', 'statuses/home_timeline.json', statuses),
    Endpoint('statuses_public_timeline', 'GET', 'statuses/public_timeline.json', statuses),
    Endpoint('statuses_replies', 'GET', 'statuses/replies.json', statuses),
    Endpoint('statuses_followers', 'GET', 'statuses/followers.json', users),
    Endpoint('statuses_update', 'POST', 'statuses/update.json', Status.from_dict, required=('status',)),
    Endpoint('statuses_user_timeline', 'GET', 'statuses/user_timeline.json', statuses),
    Endpoint('statuses_friends', 'GET', 'statuses/friends.json', users),
    Endpoint('statuses_context_timeline', 'GET', 'statuses/context_timeline.json', statuses, required=('id',)),
    Endpoint('statuses_mentions', 'GET', 'statuses/mentions.json', statuses),
    Endpoint('statuses_show', 'GET', 'statuses/show.json', Status.from_dict, required=('id',)),

    # direct messages
    Endpoint('direct_messages_destroy', 'POST', 'direct_messages/destroy.json', DirectMessage.from_dict, required=('id',)),
    Endpoint('direct_messages_conversation', 'GET', 'direct_messages/conversation.json', messages, required=('id',)),
    Endpoint('direct_messages_new', 'POST', 'direct_messages/new.json', DirectMessage.from_dict, required=('user', 'text')),
    Endpoint('direct_messages_conversation_list', 'GET', 'direct_messages/conversation_list.json',
             list_of(Conversation.from_dict)),
    Endpoint('direct_messages_inbox', 'GET', 'direct_messages/inbox.json', messages),
    Endpoint('direct_messages_sent', 'GET', 'direct_messages/sent.json', messages),
]

ENDPOINTS: Dict[str, Endpoint] = {ep.name: ep for ep in _TABLE}
