"""
Ownership decorator and profile resolution for playlist mutations.
"""

from functools import wraps

from flask import request

from tuneloop.exceptions import ForbiddenError, NotFoundError
from tuneloop.validators import json_body, parse_owner_action


def resolve_profile(username):
    """Return the profile for username or raise NotFoundError."""
    from tuneloop.models import db
    from tuneloop.services import ProfileDirectory

    profile = ProfileDirectory(db.session).find_by_username(username)
    if not profile:
        raise NotFoundError('Profile not found')
    return profile


def resolve_viewer_id(username):
    """Profile ID for an optional viewer username; unknown names are anonymous."""
    if not username:
        return None
    from tuneloop.models import db
    from tuneloop.services import ProfileDirectory

    profile = ProfileDirectory(db.session).find_by_username(username)
    return profile.id if profile else None


def owns_playlist(param_name='playlist_id', parser=parse_owner_action, source='json'):
    """
    Decorator that checks the acting profile owns the playlist.

    Steps, in order: parse the payload (400), resolve the username (404),
    check ownership (403). A missing playlist is reported as 403 too, so
    callers cannot probe which playlist IDs exist.

    The view receives ``payload`` (the parser's dict) and ``profile``.
    """
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            from tuneloop.models import db
            from tuneloop.services import PlaylistStore

            data = request.args if source == 'args' else json_body()

            payload = parser(data)
            profile = resolve_profile(payload['username'])

            pid = kwargs.get(param_name)
            if not PlaylistStore(db.session).is_owner(pid, profile.id):
                raise ForbiddenError()

            return f(*args, payload=payload, profile=profile, **kwargs)
        return decorated
    return decorator
