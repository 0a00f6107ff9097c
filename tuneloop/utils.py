"""Utility functions for request validation and serialization."""

import re
import uuid

from flask import jsonify


USERNAME_PATTERN = re.compile(r'^[A-Za-z0-9_]+$')
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50

PLAYLIST_NAME_MAX_LENGTH = 200
PLAYLIST_DESCRIPTION_MAX_LENGTH = 1000

SEARCH_MODES = ('all', 'artist', 'title')


def is_valid_uuid(value) -> bool:
    """Check if value is a canonical UUID string."""
    if not value or not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


def clamp_limit(raw_value, default: int, maximum: int) -> int:
    """
    Parse a listing limit and clamp it to [1, maximum].

    Args:
        raw_value: Value from the query string (may be None or garbage)
        default: Limit used when the value is missing or not an integer
        maximum: Upper bound

    Returns:
        A usable positive limit
    """
    try:
        value = int(str(raw_value).strip())
    except (ValueError, TypeError):
        value = default
    return max(1, min(value, maximum))


def like_pattern(term: str) -> str:
    """Build a lowercase %term% LIKE pattern with wildcards escaped."""
    escaped = (
        term.lower()
        .replace('\\', '\\\\')
        .replace('%', '\\%')
        .replace('_', '\\_')
    )
    return f'%{escaped}%'


def clean_text(value) -> str:
    """Return value stripped if it is a string, else empty string."""
    if not isinstance(value, str):
        return ''
    return value.strip()


def isoformat(value):
    """Serialize a datetime for API responses."""
    return value.isoformat() if value else None


_MISSING = object()


def ok(data=_MISSING, message: str = None, status: int = 200):
    """
    Build a success envelope.

    Returns:
        (response, status) tuple of ``{status: "ok", data?, message?}``
    """
    body = {'status': 'ok'}
    if data is not _MISSING:
        body['data'] = data
    if message:
        body['message'] = message
    return jsonify(body), status
