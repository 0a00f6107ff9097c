"""
Request payload parsing.

Each parser takes the decoded JSON body (or query args) and returns a clean
dict, raising ValidationError before anything touches the database.
"""

import uuid

from flask import request

from tuneloop.exceptions import ValidationError
from tuneloop.utils import (
    PLAYLIST_DESCRIPTION_MAX_LENGTH,
    PLAYLIST_NAME_MAX_LENGTH,
    SEARCH_MODES,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    USERNAME_PATTERN,
    clean_text,
    is_valid_uuid,
)


def json_body():
    """Decoded JSON object of the current request; anything else counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def require_username(data):
    """Return the acting username or raise."""
    username = clean_text(data.get('username'))
    if not username:
        raise ValidationError('Username is required')
    return username


def parse_profile_input(data):
    """Validate POST /profile."""
    username = clean_text(data.get('username'))
    if not username:
        raise ValidationError('Username is required')
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise ValidationError(
            f'Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters'
        )
    if not USERNAME_PATTERN.match(username):
        raise ValidationError('Username can only contain letters, numbers, and underscores')

    display_name = clean_text(data.get('displayName'))
    if not display_name:
        raise ValidationError('Display name is required')

    return {
        'username': username,
        'display_name': display_name,
        'bio': clean_text(data.get('bio')),
        'avatar_url': clean_text(data.get('avatarUrl')),
    }


def parse_playlist_input(data):
    """Validate POST /playlists."""
    username = require_username(data)

    name = clean_text(data.get('name'))
    if not name:
        raise ValidationError('Playlist name is required')
    if len(name) > PLAYLIST_NAME_MAX_LENGTH:
        raise ValidationError(
            f'Playlist name must be at most {PLAYLIST_NAME_MAX_LENGTH} characters'
        )

    description = data.get('description')
    if description is not None and not isinstance(description, str):
        raise ValidationError('Description must be a string')
    description = clean_text(description)
    if len(description) > PLAYLIST_DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f'Description must be at most {PLAYLIST_DESCRIPTION_MAX_LENGTH} characters'
        )

    return {'username': username, 'name': name, 'description': description}


def parse_add_track(data):
    """Validate POST /playlists/<id>/tracks."""
    track_id = data.get('trackId')
    if not is_valid_uuid(track_id):
        raise ValidationError('Invalid track ID')
    # Song IDs are stored in canonical lowercase form
    return {'username': require_username(data), 'track_id': str(uuid.UUID(track_id))}


def parse_owner_action(data):
    """Validate owner-only actions that only carry a username."""
    return {'username': require_username(data)}


def parse_search_args(args):
    """Validate GET /songs/search query args."""
    term = clean_text(args.get('q'))
    if not term:
        raise ValidationError('Search query "q" is required')

    mode = clean_text(args.get('by')) or 'all'
    if mode not in SEARCH_MODES:
        raise ValidationError('Parameter "by" must be artist, title, or all')

    return {'q': term, 'by': mode}
