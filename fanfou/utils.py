"""
Utility Functions
Parameter validation and request preparation shared by both clients.
"""
import os
from typing import Any, Dict, NamedTuple
from urllib.parse import quote, urljoin

from .endpoints import ENDPOINTS, Endpoint
from .errors import ValidationError

STATUS_MAX_LENGTH = 140


def resolve_endpoint(endpoint) -> Endpoint:
    """Look up an endpoint by name; table entries pass through."""
    if isinstance(endpoint, Endpoint):
        return endpoint
    try:
        return ENDPOINTS[endpoint]
    except (KeyError, TypeError):
        raise ValidationError('Unknown endpoint: {!r}'.format(endpoint)) from None


def validate_status_text(text: str, max_length: int = STATUS_MAX_LENGTH) -> bool:
    """
    Validate status text.

    Args:
        text: Status text to validate
        max_length: Maximum allowed length

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(text, str):
        return False
    if len(text) == 0 or len(text) > max_length:
        return False
    return True


def format_status(text: str) -> str:
    """Strip surrounding whitespace from status text."""
    return text.strip()


def clean_params(endpoint: Endpoint, params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the parameters of a call before anything is sent.

    Drops ``None`` values, formats the ``status`` text and makes sure every
    required parameter is present and every file path exists.

    Raises:
        ValidationError: if a parameter is missing or invalid
    """
    params = {k: v for k, v in params.items() if v is not None}

    missing = [name for name in endpoint.required if params.get(name) in (None, '')]
    if missing:
        raise ValidationError('{} requires: {}'.format(endpoint.name, ', '.join(missing)))

    if 'status' in params:
        params['status'] = format_status(str(params['status']))
        if not params['status'] and 'status' not in endpoint.required:
            del params['status']
        elif not validate_status_text(params['status']):
            raise ValidationError('status must be 1-{} characters'.format(STATUS_MAX_LENGTH))

    for name in endpoint.files:
        value = params.get(name)
        if name in params and not _is_upload(value):
            raise ValidationError('{}: expected a file path, bytes or a binary file object'.format(name))
        if isinstance(value, (str, os.PathLike)) and not os.path.isfile(value):
            raise ValidationError('{}: no such file: {}'.format(name, value))

    unknown = [name for name in params if name not in endpoint.files and not _is_scalar(params[name])]
    if unknown:
        raise ValidationError('unsupported value for: {}'.format(', '.join(unknown)))

    return params


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def _is_upload(value: Any) -> bool:
    return isinstance(value, (str, os.PathLike, bytes)) or hasattr(value, 'read')


class PreparedRequest(NamedTuple):
    method: str
    url: str
    fields: Dict[str, str]
    files: Dict[str, Any]


def prepare_request(endpoint: Endpoint, base_url: str, params: Dict[str, Any]) -> PreparedRequest:
    """Split validated params into URL, plain fields and upload files."""
    params = dict(params)
    path = endpoint.path
    if '{id}' in path:
        path = path.replace('{id}', quote(str(params.pop('id')), safe=''))

    files = {name: params.pop(name) for name in endpoint.files if name in params}
    fields = {k: _field_value(v) for k, v in params.items()}
    return PreparedRequest(endpoint.method, urljoin(base_url, path), fields, files)


def _field_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
