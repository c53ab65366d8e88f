"""Mock endpoint table: call params and canned responses for every endpoint."""
import json
from typing import Dict, NamedTuple

import requests

from fanfou.endpoints import ENDPOINTS, Endpoint, messages, statuses, users
from fanfou.models import decode_bool

API_BASE = "http://api.fanfou.com/"

USER = {"id": "test", "name": "Test User", "screen_name": "test", "followers_count": 3}
PHOTO = {"url": "http://fanfou.com/photo/abc", "largeurl": "http://photo.fanfou.com/abc.jpg"}
STATUS = {"id": "abc", "rawid": 1, "text": "hello fanfou", "user": USER}
PHOTO_STATUS = {"id": "def", "rawid": 2, "text": "with photo", "user": USER, "photo": PHOTO}
MESSAGE = {"id": "dm1", "text": "hi", "sender_id": "test", "recipient_id": "other", "sender": USER}
SAVED_SEARCH = {"id": 7, "query": "fanfou", "name": "fanfou"}

BODIES = {
    "search_users": {"total_number": 1, "users": [USER]},
    "account_rate_limit_status": {"remaining_hits": 150, "hourly_limit": 150,
                                  "reset_time": "Sat Oct 17 12:00:00 +0000 2026", "reset_time_in_seconds": 1792238400},
    "account_notification": {"mentions": 1, "direct_messages": 0, "friend_requests": 2},
    "trends_list": {"as_of": "Sat Oct 17 12:00:00 +0000 2026",
                    "trends": [{"name": "fanfou", "query": "fanfou", "url": "http://fanfou.com/q/fanfou"}]},
    "friendships_exists": True,
    "friendships_show": {"relationship": {
        "source": {"id": "test", "following": "true", "followed_by": "false", "blocking": "false"},
        "target": {"id": "other", "following": "false", "followed_by": "true"},
    }},
    "photos_upload": PHOTO_STATUS,
    "saved_searches_list": [SAVED_SEARCH],
    "direct_messages_conversation_list": [{"otherid": "other", "dm": MESSAGE, "msg_num": 4, "new_conv": False}],
    "users_tag_list": ["python", "go"],
    "blocks_ids": ["spammer"],
    "followers_ids": ["a", "b"],
    "friends_ids": ["c"],
}

PARAM_VALUES = {
    "id": "abc",
    "q": "fanfou",
    "query": "fanfou",
    "status": "hello fanfou",
    "user": "other",
    "text": "hi",
    "user_a": "test",
    "user_b": "other",
}


class MockEndpoint(NamedTuple):
    endpoint: Endpoint
    url: str
    result_200: str
    result_400: str
    result_500: str
    result_chaos: str


def _default_body(endpoint: Endpoint):
    decoder = endpoint.decoder
    if decoder is statuses:
        return [STATUS]
    if decoder is users:
        return [USER]
    if decoder is messages:
        return [MESSAGE]
    name = endpoint.name
    if name.startswith("direct_messages"):
        return MESSAGE
    if name.startswith("saved_searches"):
        return SAVED_SEARCH
    if name.startswith(("statuses", "favorites", "photos")):
        return STATUS
    return USER


def _chaos_body(body) -> str:
    # right status, wrong shape
    if isinstance(body, bool):
        return json.dumps("yes")
    if isinstance(body, list):
        return json.dumps({"error": "not a list"})
    return json.dumps([body])


def _mock(endpoint: Endpoint) -> MockEndpoint:
    body = BODIES.get(endpoint.name, _default_body(endpoint))
    path = endpoint.path.replace("{id}", PARAM_VALUES["id"])
    return MockEndpoint(
        endpoint=endpoint,
        url=API_BASE + path,
        result_200=json.dumps(body),
        result_400=json.dumps({"request": "/" + path, "error": "bad request"}),
        result_500="<html><body>Internal Server Error</body></html>",
        result_chaos=_chaos_body(body),
    )


MOCK_ENDPOINTS: Dict[str, MockEndpoint] = {name: _mock(ep) for name, ep in ENDPOINTS.items()}

BOOLEAN_ENDPOINTS = {name for name, ep in ENDPOINTS.items() if ep.decoder is decode_bool}


def params_for(endpoint: Endpoint, upload_path: str) -> Dict[str, str]:
    params = {}
    for name in endpoint.required:
        params[name] = upload_path if name in endpoint.files else PARAM_VALUES[name]
    return params


def make_response(status_code: int, body) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    return resp


class FakeSession:
    """Stand-in for the signed requests.Session; answers from registered responders."""

    def __init__(self):
        self.responders = {}
        self.calls = []

    def register(self, method: str, url: str, status_code: int, body):
        self.responders[(method, url)] = (status_code, body)

    def request(self, method, url, **kwargs):
        files = kwargs.get("files") or {}
        uploads = {}
        for name, value in files.items():
            filename, fh = value
            uploads[name] = (filename, fh.read())
        self.calls.append({"method": method, "url": url, "params": kwargs.get("params"),
                           "data": kwargs.get("data"), "files": uploads})

        if (method, url) not in self.responders:
            raise requests.ConnectionError("no responder for {} {}".format(method, url))
        status_code, body = self.responders[(method, url)]
        return make_response(status_code, body)

    def close(self):
        pass
