"""
Authentication Module
Handle Fanfou OAuth1 consumer credentials, request signing and token exchange.
"""

from typing import Dict, NamedTuple, Optional
from urllib.parse import parse_qsl, urljoin

import requests
from oauthlib.oauth1 import Client as OAuthClient
from requests_oauthlib import OAuth1, OAuth1Session

from .config import Config
from .errors import AuthError, TransportError
from .logger import logger


class Credentials(NamedTuple):
    """Consumer key/secret plus the access token pair of one user."""
    consumer_key: str
    consumer_secret: str
    access_token: str
    access_secret: str


class Auth:
    """Hold the application's OAuth consumer and build signers from it."""

    def __init__(self, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 oauth_base: Optional[str] = None):
        """
        Initialize authentication.

        Args:
            consumer_key: Fanfou consumer key (or from env FANFOU_CONSUMER_KEY)
            consumer_secret: Fanfou consumer secret (or from env FANFOU_CONSUMER_SECRET)
            oauth_base: Base URL of the OAuth endpoints (or from env FANFOU_OAUTH_BASE)
        """
        self.consumer_key = consumer_key or Config.FANFOU_CONSUMER_KEY
        self.consumer_secret = consumer_secret or Config.FANFOU_CONSUMER_SECRET
        self.oauth_base = oauth_base or Config.FANFOU_OAUTH_BASE

        if not all([self.consumer_key, self.consumer_secret]):
            raise AuthError("Missing required consumer credentials")

    def credentials(self, token: str, secret: str) -> Credentials:
        """Bind an access token pair to this consumer."""
        if not token or not secret:
            raise AuthError("Access token and secret are both required")
        return Credentials(self.consumer_key, self.consumer_secret, token, secret)

    def signer(self, credentials: Credentials) -> OAuth1:
        """Build a requests auth hook that signs every request."""
        try:
            return OAuth1(
                client_key=credentials.consumer_key,
                client_secret=credentials.consumer_secret,
                resource_owner_key=credentials.access_token,
                resource_owner_secret=credentials.access_secret,
            )
        except ValueError as e:
            raise AuthError("Could not build OAuth signer: {}".format(e)) from e

    def oauth_client(self, credentials: Credentials) -> OAuthClient:
        """Build a bare oauthlib client, used to sign requests sent through aiohttp."""
        try:
            return OAuthClient(
                credentials.consumer_key,
                client_secret=credentials.consumer_secret,
                resource_owner_key=credentials.access_token,
                resource_owner_secret=credentials.access_secret,
            )
        except ValueError as e:
            raise AuthError("Could not build OAuth signer: {}".format(e)) from e

    def make_http_client(self, credentials: Credentials) -> requests.Session:
        """Return a session that signs all of its requests with ``credentials``."""
        session = requests.Session()
        session.auth = self.signer(credentials)
        return session

    def _url(self, name: str) -> str:
        return urljoin(self.oauth_base, name)

    def fetch_request_token(self, callback_uri: Optional[str] = None) -> Dict[str, str]:
        """
        Step one of the three-legged flow.

        Returns:
            Dict with ``oauth_token`` and ``oauth_token_secret``
        """
        session = OAuth1Session(self.consumer_key, client_secret=self.consumer_secret, callback_uri=callback_uri)
        return self._fetch(lambda: session.fetch_request_token(self._url('request_token')))

    def authorization_url(self, request_token: Dict[str, str], callback_uri: Optional[str] = None) -> str:
        """URL the user has to visit to approve the request token."""
        session = OAuth1Session(self.consumer_key, client_secret=self.consumer_secret)
        kwargs = {'oauth_callback': callback_uri} if callback_uri else {}
        return session.authorization_url(self._url('authorize'), request_token=request_token['oauth_token'], **kwargs)

    def fetch_access_token(self, request_token: Dict[str, str], verifier: Optional[str] = None) -> Dict[str, str]:
        """Exchange an approved request token for an access token."""
        session = OAuth1Session(
            self.consumer_key,
            client_secret=self.consumer_secret,
            resource_owner_key=request_token['oauth_token'],
            resource_owner_secret=request_token['oauth_token_secret'],
            verifier=verifier,
        )
        return self._fetch(lambda: session.fetch_access_token(self._url('access_token')))

    def xauth(self, username: str, password: str) -> Dict[str, str]:
        """Obtain an access token directly from a username and password (XAuth)."""
        if not username or not password:
            raise AuthError("Username and password are both required")
        session = OAuth1Session(self.consumer_key, client_secret=self.consumer_secret)
        data = {'x_auth_username': username, 'x_auth_password': password, 'x_auth_mode': 'client_auth'}

        try:
            resp = session.post(self._url('access_token'), data=data, timeout=Config.FANFOU_TIMEOUT)
        except requests.RequestException as e:
            raise TransportError("XAuth request failed: {}".format(e)) from e

        token = dict(parse_qsl(resp.text))
        if resp.status_code != 200 or 'oauth_token' not in token or 'oauth_token_secret' not in token:
            logger.warning('XAuth rejected for %s (HTTP %s)', username, resp.status_code)
            raise AuthError("XAuth rejected (HTTP {}): {}".format(resp.status_code, resp.text[:200]))
        return token

    def _fetch(self, call):
        try:
            return call()
        except requests.RequestException as e:
            raise TransportError("OAuth request failed: {}".format(e)) from e
        except ValueError as e:
            # TokenRequestDenied and TokenMissing are ValueErrors
            raise AuthError("OAuth token exchange failed: {}".format(e)) from e
