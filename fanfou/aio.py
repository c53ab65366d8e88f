"""
Async Fanfou API client built on aiohttp.

Same endpoint methods and ``Response`` contract as ``FanfouClient``; each
call is awaited instead of blocking. Requests are signed with oauthlib
directly since aiohttp has no OAuth1 auth hook.
"""
import asyncio
import os
from contextlib import ExitStack
from typing import Optional, Union
from urllib.parse import urlencode

import aiohttp
from oauthlib.oauth1 import Client as OAuthClient
from yarl import URL

from .api import API
from .auth import Auth, Credentials
from .config import Config
from .endpoints import Endpoint
from .errors import AuthError, TransportError, ValidationError
from .logger import logger
from .response import Response, classify, failure
from .utils import PreparedRequest, clean_params, prepare_request, resolve_endpoint

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class AsyncFanfouClient(API):
    """Awaitable Fanfou client. Use as ``async with AsyncFanfouClient(...) as client``.

    Outside ``async with`` the first call opens a session of its own; the
    caller then owns it and must ``await client.close()``.
    """

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.auth = Auth(consumer_key, consumer_secret)
        self.base_url = base_url or Config.FANFOU_API_BASE
        self.timeout = timeout if timeout is not None else Config.FANFOU_TIMEOUT
        self.credentials: Optional[Credentials] = None
        self.signer: Optional[OAuthClient] = None
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        if self.session is not None and self._owns_session:
            await self.session.close()
            self.session = None

    def set_access_token(self, token: str, secret: str) -> OAuthClient:
        """Attach a user's access token. Raises AuthError on bad token material."""
        credentials = self.auth.credentials(token, secret)
        self.signer = self.auth.oauth_client(credentials)
        self.credentials = credentials
        return self.signer

    async def call(self, endpoint: Union[Endpoint, str], **params) -> Response:
        try:
            endpoint = resolve_endpoint(endpoint)
        except ValidationError as e:
            return Response(None, None, e)

        try:
            params = clean_params(endpoint, params)
        except ValidationError as e:
            return failure(endpoint, e)

        if self.signer is None:
            return failure(endpoint, AuthError('No access token attached, call set_access_token() first'))
        if self.session is None:
            self.session = aiohttp.ClientSession()
            self._owns_session = True

        req = prepare_request(endpoint, self.base_url, params)
        with ExitStack() as stack:
            try:
                url, headers, data = self._sign(req, stack)
            except OSError as e:
                return failure(endpoint, ValidationError('Could not read upload: {}'.format(e)))
            except ValueError as e:
                return failure(endpoint, AuthError('Could not sign request: {}'.format(e)))

            logger.debug('%s %s', req.method, req.url)
            try:
                async with self.session.request(req.method, URL(url, encoded=True), headers=headers, data=data,
                                                timeout=aiohttp.ClientTimeout(total=self.timeout)) as resp:
                    body = await resp.read()
                    status = resp.status
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.warning('%s transport failure: %s', endpoint.name, e)
                return failure(endpoint, TransportError(str(e) or type(e).__name__))

        return classify(endpoint, status, body)

    def _sign(self, req: PreparedRequest, stack: ExitStack):
        """Return the signed url, headers and body for ``req``."""
        if req.method == 'GET':
            url = req.url + ('?' + urlencode(req.fields) if req.fields else '')
            url, headers, _ = self.signer.sign(url, 'GET')
            return url, headers, None

        if req.files:
            # multipart bodies are not part of the OAuth1 signature base string
            url, headers, _ = self.signer.sign(req.url, 'POST')
            form = aiohttp.FormData()
            for name, value in req.fields.items():
                form.add_field(name, value)
            for name, value in req.files.items():
                if isinstance(value, (str, os.PathLike)):
                    form.add_field(name, stack.enter_context(open(value, 'rb')), filename=os.path.basename(value))
                else:
                    form.add_field(name, value)
            return url, headers, form

        if not req.fields:
            url, headers, _ = self.signer.sign(req.url, 'POST')
            return url, headers, None

        body = urlencode(req.fields)
        return self.signer.sign(req.url, 'POST', body=body, headers={'Content-Type': FORM_CONTENT_TYPE})
