"""
Fanfou API Client
Blocking client for the Fanfou REST API, built on requests.
"""

import os
from contextlib import ExitStack
from typing import Optional, Union

import requests

from .api import API
from .auth import Auth, Credentials
from .config import Config
from .endpoints import Endpoint
from .errors import AuthError, TransportError, ValidationError
from .logger import logger
from .response import Response, classify, failure
from .utils import clean_params, prepare_request, resolve_endpoint


class FanfouClient(API):
    """Fanfou API client: one method per endpoint, each returning a ``Response``."""

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize an unauthenticated client. No network I/O happens here.

        Args:
            consumer_key: Fanfou consumer key
            consumer_secret: Fanfou consumer secret
            base_url: API base URL (default from Config.FANFOU_API_BASE)
            timeout: Per-request timeout in seconds (default from Config.FANFOU_TIMEOUT)
        """
        self.auth = Auth(consumer_key, consumer_secret)
        self.base_url = base_url or Config.FANFOU_API_BASE
        self.timeout = timeout if timeout is not None else Config.FANFOU_TIMEOUT
        self.credentials: Optional[Credentials] = None
        self.http: Optional[requests.Session] = None

    @classmethod
    def with_oauth(cls, consumer_key: str, consumer_secret: str, **kwargs) -> 'FanfouClient':
        return cls(consumer_key, consumer_secret, **kwargs)

    @classmethod
    def from_env(cls) -> 'FanfouClient':
        """Build a ready client from the FANFOU_* environment variables."""
        client = cls()
        client.set_access_token(Config.FANFOU_ACCESS_TOKEN, Config.FANFOU_ACCESS_SECRET)
        return client

    def set_access_token(self, token: str, secret: str) -> requests.Session:
        """
        Attach a user's access token and build the signing transport.

        Raises:
            AuthError: if the token material is missing or the signer cannot be built
        """
        credentials = self.auth.credentials(token, secret)
        self.http = self.auth.make_http_client(credentials)
        self.credentials = credentials
        logger.debug('Access token attached for consumer %s', credentials.consumer_key)
        return self.http

    def call(self, endpoint: Union[Endpoint, str], **params) -> Response:
        """Validate, send and classify one endpoint call. Never raises."""
        try:
            endpoint = resolve_endpoint(endpoint)
        except ValidationError as e:
            return Response(None, None, e)

        try:
            params = clean_params(endpoint, params)
        except ValidationError as e:
            return failure(endpoint, e)

        if self.http is None:
            return failure(endpoint, AuthError('No access token attached, call set_access_token() first'))

        req = prepare_request(endpoint, self.base_url, params)
        with ExitStack() as stack:
            try:
                files = {name: _open(stack, value) for name, value in req.files.items()}
            except OSError as e:
                return failure(endpoint, ValidationError('Could not read upload: {}'.format(e)))

            logger.debug('%s %s', req.method, req.url)
            try:
                if req.method == 'GET':
                    resp = self.http.request('GET', req.url, params=req.fields, timeout=self.timeout)
                else:
                    resp = self.http.request(req.method, req.url, data=req.fields, files=files or None,
                                             timeout=self.timeout)
            except requests.RequestException as e:
                logger.warning('%s transport failure: %s', endpoint.name, e)
                return failure(endpoint, TransportError(str(e)))

        return classify(endpoint, resp.status_code, resp.content)

    def close(self):
        if self.http is not None:
            self.http.close()


def _open(stack: ExitStack, value):
    """Turn a file path into an open file; file objects pass through."""
    if isinstance(value, (str, os.PathLike)):
        return os.path.basename(value), stack.enter_context(open(value, 'rb'))
    return value
