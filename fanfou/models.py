"""
Typed payloads returned by the Fanfou API.

Each model is built from the decoded JSON object with ``from_dict``. A
payload that lacks a required key or has the wrong JSON type raises
``KeyError``/``TypeError``/``ValueError``; the response classifier turns
those into ``DecodeError``.
"""
from typing import Any, Callable, Dict, List, NamedTuple, Optional


def _expect(value: Any, kind: type, what: str):
    if not isinstance(value, kind):
        raise TypeError('expected {} for {}, got {}'.format(kind.__name__, what, type(value).__name__))
    return value


def _as_bool(value: Any) -> bool:
    # the API mixes JSON booleans and "true"/"false" strings
    if isinstance(value, str):
        return value.lower() == 'true'
    return bool(value)


class User(NamedTuple):
    """A Fanfou user."""
    id: str
    name: str
    screen_name: str = ''
    location: str = ''
    description: str = ''
    profile_image_url: str = ''
    url: str = ''
    protected: bool = False
    followers_count: int = 0
    friends_count: int = 0
    statuses_count: int = 0
    following: bool = False
    created_at: Optional[str] = None
    raw: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        _expect(data, dict, 'user')
        return cls(
            id=data['id'],
            name=data['name'],
            screen_name=data.get('screen_name', ''),
            location=data.get('location', ''),
            description=data.get('description', ''),
            profile_image_url=data.get('profile_image_url', ''),
            url=data.get('url', ''),
            protected=_as_bool(data.get('protected', False)),
            followers_count=int(data.get('followers_count') or 0),
            friends_count=int(data.get('friends_count') or 0),
            statuses_count=int(data.get('statuses_count') or 0),
            following=_as_bool(data.get('following', False)),
            created_at=data.get('created_at'),
            raw=data,
        )


class Photo(NamedTuple):
    url: str
    imageurl: str = ''
    thumburl: str = ''
    largeurl: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Photo':
        _expect(data, dict, 'photo')
        return cls(
            url=data['url'],
            imageurl=data.get('imageurl', ''),
            thumburl=data.get('thumburl', ''),
            largeurl=data.get('largeurl', ''),
        )


class Status(NamedTuple):
    """A status (message posted to a timeline)."""
    id: str
    text: str
    rawid: Optional[int] = None
    source: str = ''
    created_at: Optional[str] = None
    truncated: bool = False
    favorited: bool = False
    in_reply_to_status_id: str = ''
    in_reply_to_user_id: str = ''
    in_reply_to_screen_name: str = ''
    repost_status_id: str = ''
    repost_status: Optional['Status'] = None
    user: Optional[User] = None
    photo: Optional[Photo] = None
    raw: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Status':
        _expect(data, dict, 'status')
        repost = data.get('repost_status')
        user = data.get('user')
        photo = data.get('photo')
        return cls(
            id=data['id'],
            text=data['text'],
            rawid=data.get('rawid'),
            source=data.get('source', ''),
            created_at=data.get('created_at'),
            truncated=_as_bool(data.get('truncated', False)),
            favorited=_as_bool(data.get('favorited', False)),
            in_reply_to_status_id=data.get('in_reply_to_status_id', ''),
            in_reply_to_user_id=data.get('in_reply_to_user_id', ''),
            in_reply_to_screen_name=data.get('in_reply_to_screen_name', ''),
            repost_status_id=data.get('repost_status_id', ''),
            repost_status=cls.from_dict(repost) if repost else None,
            user=User.from_dict(user) if user else None,
            photo=Photo.from_dict(photo) if photo else None,
            raw=data,
        )


class DirectMessage(NamedTuple):
    id: str
    text: str
    sender_id: str
    recipient_id: str
    created_at: Optional[str] = None
    sender_screen_name: str = ''
    recipient_screen_name: str = ''
    sender: Optional[User] = None
    recipient: Optional[User] = None
    raw: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DirectMessage':
        _expect(data, dict, 'direct message')
        sender = data.get('sender')
        recipient = data.get('recipient')
        return cls(
            id=data['id'],
            text=data['text'],
            sender_id=data['sender_id'],
            recipient_id=data['recipient_id'],
            created_at=data.get('created_at'),
            sender_screen_name=data.get('sender_screen_name', ''),
            recipient_screen_name=data.get('recipient_screen_name', ''),
            sender=User.from_dict(sender) if sender else None,
            recipient=User.from_dict(recipient) if recipient else None,
            raw=data,
        )


class Conversation(NamedTuple):
    """One entry of the direct message conversation list."""
    otherid: str
    dm: DirectMessage
    msg_num: int = 0
    new_conv: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Conversation':
        _expect(data, dict, 'conversation')
        return cls(
            otherid=data['otherid'],
            dm=DirectMessage.from_dict(data['dm']),
            msg_num=int(data.get('msg_num') or 0),
            new_conv=_as_bool(data.get('new_conv', False)),
        )


class SavedSearch(NamedTuple):
    id: int
    query: str
    name: str = ''
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SavedSearch':
        _expect(data, dict, 'saved search')
        return cls(
            id=data['id'],
            query=data['query'],
            name=data.get('name', ''),
            created_at=data.get('created_at'),
        )


class Trend(NamedTuple):
    name: str
    query: str
    url: str = ''


class Trends(NamedTuple):
    as_of: str
    trends: List[Trend]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Trends':
        _expect(data, dict, 'trends')
        items = _expect(data['trends'], list, 'trends')
        return cls(
            as_of=data['as_of'],
            trends=[Trend(name=t['name'], query=t['query'], url=t.get('url', '')) for t in items],
        )


class RateLimit(NamedTuple):
    remaining_hits: int
    hourly_limit: int
    reset_time: str = ''
    reset_time_in_seconds: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RateLimit':
        _expect(data, dict, 'rate limit status')
        return cls(
            remaining_hits=int(data['remaining_hits']),
            hourly_limit=int(data['hourly_limit']),
            reset_time=data.get('reset_time', ''),
            reset_time_in_seconds=int(data.get('reset_time_in_seconds') or 0),
        )


class Notification(NamedTuple):
    """Unread counters for the authenticated user."""
    mentions: int
    direct_messages: int
    friend_requests: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Notification':
        _expect(data, dict, 'notification')
        return cls(
            mentions=int(data['mentions']),
            direct_messages=int(data['direct_messages']),
            friend_requests=int(data['friend_requests']),
        )


class Relationship(NamedTuple):
    source_id: str
    target_id: str
    following: bool
    followed_by: bool
    blocking: bool = False
    notifications_enabled: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Relationship':
        _expect(data, dict, 'relationship')
        rel = _expect(data['relationship'], dict, 'relationship')
        source = _expect(rel['source'], dict, 'relationship source')
        target = _expect(rel['target'], dict, 'relationship target')
        return cls(
            source_id=source['id'],
            target_id=target['id'],
            following=_as_bool(source['following']),
            followed_by=_as_bool(source['followed_by']),
            blocking=_as_bool(source.get('blocking', False)),
            notifications_enabled=_as_bool(source.get('notifications_enabled', False)),
        )


def list_of(factory: Callable[[Any], Any]) -> Callable[[Any], list]:
    """Build a decoder for a JSON array of ``factory`` items."""
    def decode(data):
        return [factory(item) for item in _expect(data, list, 'list')]
    return decode


def decode_bool(data) -> bool:
    return _expect(data, bool, 'boolean result')


def decode_strings(data) -> List[str]:
    return [_expect(item, str, 'list item') for item in _expect(data, list, 'string list')]


def decode_user_search(data) -> List[User]:
    _expect(data, dict, 'user search result')
    return list_of(User.from_dict)(data['users'])
