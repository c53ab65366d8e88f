"""Shared fixtures for the Fanfou client tests."""

import pytest

from fanfou.client import FanfouClient
from fixtures import FakeSession

CONSUMER_KEY = "CK"
CONSUMER_SECRET = "CS"
ACCESS_TOKEN = "AT"
ACCESS_SECRET = "AS"


@pytest.fixture
def upload_path(tmp_path):
    """A small file to send as photo/image upload."""
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return str(path)


@pytest.fixture
def fake_http():
    return FakeSession()


@pytest.fixture
def client(fake_http):
    """Authenticated client whose transport is swapped for the fake session."""
    client = FanfouClient.with_oauth(CONSUMER_KEY, CONSUMER_SECRET)
    client.set_access_token(ACCESS_TOKEN, ACCESS_SECRET)
    client.http = fake_http
    return client
