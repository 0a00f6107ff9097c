"""
Services package for TuneLoop.
"""

from .playlist_service import PlaylistStore
from .profile_service import ProfileDirectory
from .song_service import SongCatalog

__all__ = ['PlaylistStore', 'ProfileDirectory', 'SongCatalog']
