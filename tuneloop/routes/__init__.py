"""
Routes package for TuneLoop.
Registers all Flask blueprints.
"""

from .health import bp as health_bp
from .playlists import bp as playlists_bp
from .profiles import bp as profiles_bp
from .songs import bp as songs_bp

__all__ = ['health_bp', 'playlists_bp', 'profiles_bp', 'songs_bp']
