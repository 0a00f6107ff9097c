"""
Models package for TuneLoop.
"""

from .database import db, init_db, insert_ignore, check_connection, utcnow
from .like import Like
from .playlist import Playlist, PlaylistTrack
from .profile import Profile
from .song import Song

__all__ = [
    'db', 'init_db', 'insert_ignore', 'check_connection', 'utcnow',
    'Like', 'Playlist', 'PlaylistTrack', 'Profile', 'Song',
]
