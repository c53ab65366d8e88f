"""
Response classification.

Maps an HTTP status code and body to a ``Response`` triple for a given
endpoint. Classification is pure: the same inputs always give equal outputs.
"""
import json
from typing import Any, NamedTuple, Optional

from .endpoints import Endpoint
from .errors import APIError, DecodeError, FanfouError
from .logger import logger


class Response(NamedTuple):
    """Outcome of one endpoint call.

    On success ``data`` holds the decoded payload and ``error`` is None. On
    failure ``error`` is set and ``data`` is the endpoint's failure value
    (``None``, or ``False`` for boolean endpoints). ``raw`` is the response
    body for every 2xx answer, including ones that failed to decode.
    """
    data: Any
    raw: Optional[bytes]
    error: Optional[FanfouError]

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        """Return ``data``, or raise ``error`` if the call failed."""
        if self.error is not None:
            raise self.error
        return self.data


def failure(endpoint: Endpoint, error: FanfouError, raw: Optional[bytes] = None) -> Response:
    return Response(endpoint.failure_value, raw, error)


def parse_error(status_code: int, body: bytes) -> APIError:
    """Build an APIError from an error body such as ``{"request": ..., "error": ...}``."""
    text = body.decode('utf-8', errors='replace') if body else ''
    try:
        payload = json.loads(text)
    except ValueError:
        payload = None

    if isinstance(payload, dict) and 'error' in payload:
        return APIError(status_code, str(payload['error']), payload.get('request'))
    return APIError(status_code, text.strip()[:200] or 'empty response body')


def classify(endpoint: Endpoint, status_code: int, body: bytes) -> Response:
    body = body or b''

    if not 200 <= status_code < 300:
        error = parse_error(status_code, body)
        logger.warning('%s failed: %s', endpoint.name, error)
        return failure(endpoint, error)

    try:
        data = endpoint.decoder(json.loads(body.decode('utf-8')))
    except (ValueError, KeyError, TypeError) as e:
        logger.warning('%s returned a malformed body: %s', endpoint.name, e)
        return failure(endpoint, DecodeError('malformed {} response: {}'.format(endpoint.name, e), body), raw=body)

    return Response(data, body, None)
