"""Tests for the Fanfou API Client."""

import json

import pytest
import requests
from requests_oauthlib import OAuth1

from fanfou.api import API
from fanfou.client import FanfouClient
from fanfou.config import Config
from fanfou.endpoints import ENDPOINTS
from fanfou.errors import APIError, AuthError, DecodeError, TransportError, ValidationError
from fanfou.models import Status
from fanfou.response import Response
from fixtures import API_BASE, BOOLEAN_ENDPOINTS, MOCK_ENDPOINTS, PHOTO_STATUS, FakeSession, params_for

ENDPOINT_NAMES = sorted(MOCK_ENDPOINTS)


def _register(client, name, which):
    mep = MOCK_ENDPOINTS[name]
    status_code, body = {
        "200": (200, mep.result_200),
        "400": (400, mep.result_400),
        "500": (500, mep.result_500),
        "chaos": (200, mep.result_chaos),
    }[which]
    client.http.register(mep.endpoint.method, mep.url, status_code, body)
    return body


def _invoke(client, name, upload_path):
    method = getattr(client, name)
    return method(**params_for(ENDPOINTS[name], upload_path))


def test_client_initialization():
    """Test FanfouClient initialization."""
    client = FanfouClient.with_oauth("test_key", "test_secret")
    assert client.auth.consumer_key == "test_key"
    assert client.auth.consumer_secret == "test_secret"
    assert client.base_url == Config.FANFOU_API_BASE
    assert client.http is None
    assert client.credentials is None


def test_client_requires_consumer(monkeypatch):
    monkeypatch.setattr(Config, "FANFOU_CONSUMER_KEY", None)
    monkeypatch.setattr(Config, "FANFOU_CONSUMER_SECRET", None)
    with pytest.raises(AuthError):
        FanfouClient()


def test_set_access_token_builds_signed_session():
    client = FanfouClient.with_oauth("CK", "CS")
    http = client.set_access_token("AT", "AS")

    assert http is client.http
    assert isinstance(http, requests.Session)
    assert isinstance(http.auth, OAuth1)
    assert client.credentials.access_token == "AT"
    assert client.credentials.access_secret == "AS"


@pytest.mark.parametrize("token,secret", [("", "AS"), ("AT", ""), (None, None)])
def test_set_access_token_rejects_missing_material(token, secret):
    client = FanfouClient.with_oauth("CK", "CS")
    with pytest.raises(AuthError):
        client.set_access_token(token, secret)
    assert client.http is None


def test_from_env(monkeypatch):
    monkeypatch.setattr(Config, "FANFOU_CONSUMER_KEY", "env_key")
    monkeypatch.setattr(Config, "FANFOU_CONSUMER_SECRET", "env_secret")
    monkeypatch.setattr(Config, "FANFOU_ACCESS_TOKEN", "env_token")
    monkeypatch.setattr(Config, "FANFOU_ACCESS_SECRET", "env_token_secret")

    client = FanfouClient.from_env()
    assert client.credentials.consumer_key == "env_key"
    assert client.credentials.access_token == "env_token"


def test_every_endpoint_has_a_method(client, monkeypatch):
    seen = []
    monkeypatch.setattr(client, "call", lambda endpoint, **params: seen.append(endpoint))
    for name in ENDPOINT_NAMES:
        getattr(client, name)()
    assert [ep.name for ep in seen] == ENDPOINT_NAMES


@pytest.mark.parametrize("name", ENDPOINT_NAMES)
def test_successful_responses(client, upload_path, name):
    """200 with a well-formed body: data set, raw body returned, no error."""
    body = _register(client, name, "200")
    data, raw, error = _invoke(client, name, upload_path)

    assert error is None
    assert data is not None
    assert isinstance(raw, bytes)
    assert raw == body.encode("utf-8")


@pytest.mark.parametrize("name", ENDPOINT_NAMES)
def test_client_error_responses(client, upload_path, name):
    """400: error set, raw is None, data is None (False for boolean endpoints)."""
    _register(client, name, "400")
    data, raw, error = _invoke(client, name, upload_path)

    assert isinstance(error, APIError)
    assert error.status_code == 400
    assert error.message == "bad request"
    assert raw is None
    if name in BOOLEAN_ENDPOINTS:
        assert data is False
    else:
        assert data is None


@pytest.mark.parametrize("name", ENDPOINT_NAMES)
def test_server_error_responses(client, upload_path, name):
    """500: same shape as 400."""
    _register(client, name, "500")
    data, raw, error = _invoke(client, name, upload_path)

    assert isinstance(error, APIError)
    assert error.is_server_error
    assert raw is None
    if name in BOOLEAN_ENDPOINTS:
        assert data is False
    else:
        assert data is None


@pytest.mark.parametrize("name", ENDPOINT_NAMES)
def test_chaos_responses(client, upload_path, name):
    """200 with a body of the wrong shape: decode error, raw body kept."""
    body = _register(client, name, "chaos")
    data, raw, error = _invoke(client, name, upload_path)

    assert isinstance(error, DecodeError)
    assert raw == body.encode("utf-8")
    assert data is ENDPOINTS[name].failure_value


def test_friendships_exists_bad_request():
    client = FanfouClient.with_oauth("CK", "CS")
    client.set_access_token("AT", "AS")
    client.http = FakeSession()
    client.http.register("GET", API_BASE + "friendships/exists.json", 400, '{"error":"bad request"}')

    data, raw, error = client.friendships_exists(user_a="test", user_b="other")

    assert data is False
    assert error is not None
    assert raw is None


def test_friendships_exists_answers(client):
    url = API_BASE + "friendships/exists.json"
    client.http.register("GET", url, 200, "false")

    resp = client.friendships_exists(user_a="test", user_b="other")
    assert resp.ok
    assert resp.data is False
    assert client.http.calls[0]["params"] == {"user_a": "test", "user_b": "other"}


def test_photo_upload(client, upload_path):
    client.http.register("POST", API_BASE + "photos/upload.json", 200, json.dumps(PHOTO_STATUS))

    data, raw, error = client.photos_upload(photo=upload_path, status="look at this")

    assert error is None
    assert isinstance(data, Status)
    assert data.id == "def"
    assert data.photo.largeurl == "http://photo.fanfou.com/abc.jpg"

    call = client.http.calls[0]
    assert call["data"] == {"status": "look at this"}
    filename, content = call["files"]["photo"]
    assert filename == "photo.jpg"
    assert content.startswith(b"\xff\xd8")


def test_path_id_is_substituted(client):
    client.http.register("POST", API_BASE + "favorites/create/a%2Fb.json", 200,
                         json.dumps({"id": "a/b", "text": "fav"}))

    resp = client.favorites_create(id="a/b")
    assert resp.ok
    assert client.http.calls[0]["data"] == {}


def test_get_sends_query_and_post_sends_form(client):
    client.http.register("GET", API_BASE + "statuses/user_timeline.json", 200, "[]")
    client.http.register("POST", API_BASE + "statuses/update.json", 200, json.dumps({"id": "x", "text": "hi"}))

    assert client.statuses_user_timeline(id="test", count=5, since_id=None).data == []
    assert client.statuses_update(status="  hi  ").data.text == "hi"

    get_call, post_call = client.http.calls
    assert get_call["params"] == {"id": "test", "count": "5"}
    assert post_call["data"] == {"status": "hi"}
    assert post_call["files"] == {}


def test_transport_failure(client):
    """No responder registered: the fake session raises ConnectionError."""
    data, raw, error = client.statuses_home_timeline()

    assert isinstance(error, TransportError)
    assert data is None
    assert raw is None


def test_transport_failure_boolean_endpoint(client):
    data, raw, error = client.friendships_exists(user_a="a", user_b="b")
    assert isinstance(error, TransportError)
    assert data is False
    assert raw is None


def test_call_without_token():
    client = FanfouClient.with_oauth("CK", "CS")
    data, raw, error = client.statuses_public_timeline()
    assert isinstance(error, AuthError)
    assert data is None
    assert raw is None


@pytest.mark.parametrize("params", [
    {},
    {"status": ""},
    {"status": "   "},
    {"status": "x" * 141},
])
def test_statuses_update_validation(client, params):
    data, raw, error = client.statuses_update(**params)
    assert isinstance(error, ValidationError)
    assert data is None
    assert raw is None
    assert client.http.calls == []


def test_missing_upload_file(client, tmp_path):
    data, raw, error = client.photos_upload(photo=str(tmp_path / "missing.jpg"))
    assert isinstance(error, ValidationError)
    assert client.http.calls == []


def test_missing_boolean_params(client):
    resp = client.friendships_exists(user_a="test")
    assert isinstance(resp.error, ValidationError)
    assert resp.data is False


def test_call_by_name(client):
    client.http.register("GET", API_BASE + "statuses/show.json", 200, json.dumps({"id": "abc", "text": "t"}))
    resp = client.call("statuses_show", id="abc")
    assert isinstance(resp, Response)
    assert resp.unwrap().id == "abc"


def test_unwrap_raises(client):
    client.http.register("GET", API_BASE + "statuses/show.json", 404,
                         json.dumps({"request": "/statuses/show.json", "error": "no such status"}))
    resp = client.statuses_show(id="nope")
    with pytest.raises(APIError) as excinfo:
        resp.unwrap()
    assert excinfo.value.request == "/statuses/show.json"
    assert excinfo.value.is_client_error


@pytest.mark.parametrize("name", ["statuses_nope", "", None])
def test_unknown_endpoint_is_returned_as_error(client, name):
    data, raw, error = client.call(name)
    assert isinstance(error, ValidationError)
    assert data is None
    assert raw is None
    assert client.http.calls == []


@pytest.mark.parametrize("photo", [{"a": 1}, 42, ["photo.jpg"]])
def test_upload_rejects_non_file_values(client, photo):
    data, raw, error = client.photos_upload(photo=photo)
    assert isinstance(error, ValidationError)
    assert data is None
    assert client.http.calls == []


def test_photo_upload_with_empty_status(client, upload_path):
    client.http.register("POST", API_BASE + "photos/upload.json", 200, json.dumps(PHOTO_STATUS))

    resp = client.photos_upload(photo=upload_path, status="  ")

    assert resp.ok
    assert client.http.calls[0]["data"] == {}


def test_api_base_is_abstract():
    with pytest.raises(TypeError):
        API()
