"""
Authorization package for TuneLoop.

There are no credentials: the username in a request names the acting
profile, and playlist ownership is the only access rule.
"""

from .decorators import owns_playlist, resolve_profile, resolve_viewer_id

__all__ = ['owns_playlist', 'resolve_profile', 'resolve_viewer_id']
