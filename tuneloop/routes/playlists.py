"""
Playlist Routes - CRUD and track management.
"""

from flask import Blueprint, request

from tuneloop.auth import owns_playlist, resolve_profile, resolve_viewer_id
from tuneloop.exceptions import NotFoundError
from tuneloop.models import db
from tuneloop.services import PlaylistStore, SongCatalog
from tuneloop.utils import ok
from tuneloop.validators import json_body, parse_add_track, parse_playlist_input

bp = Blueprint('playlists', __name__)


# ==================== Playlist CRUD ====================

@bp.route('/playlists', methods=['POST'])
def create_playlist():
    """Create a new playlist."""
    data = parse_playlist_input(json_body())
    profile = resolve_profile(data['username'])

    playlist = PlaylistStore(db.session).create(
        profile.id, data['name'], data['description'],
    )
    return ok(playlist, status=201)


@bp.route('/playlists/user/<username>', methods=['GET'])
def list_playlists(username):
    """Return playlists owned by a profile."""
    profile = resolve_profile(username.strip())
    return ok(PlaylistStore(db.session).list_by_user(profile.id))


@bp.route('/playlists/<playlist_id>', methods=['GET'])
def get_playlist(playlist_id):
    """Return a playlist with its tracks."""
    viewer_id = resolve_viewer_id(request.args.get('username', '').strip())
    playlist = PlaylistStore(db.session).get_by_id(playlist_id, viewer_id)
    if not playlist:
        raise NotFoundError('Playlist not found')
    return ok(playlist)


@bp.route('/playlists/<playlist_id>', methods=['DELETE'])
@owns_playlist('playlist_id')
def delete_playlist(playlist_id, payload, profile):
    """Delete playlist and all its tracks."""
    PlaylistStore(db.session).delete(playlist_id)
    return ok(message='Playlist deleted')


# ==================== Track Management ====================

@bp.route('/playlists/<playlist_id>/tracks', methods=['POST'])
@owns_playlist('playlist_id', parser=parse_add_track)
def add_track(playlist_id, payload, profile):
    """Add a catalog song to a playlist."""
    track_id = payload['track_id']
    if not SongCatalog(db.session).get_by_id(track_id):
        raise NotFoundError('Song not found')

    PlaylistStore(db.session).add_track(playlist_id, track_id)
    return ok(message='Track added to playlist')


@bp.route('/playlists/<playlist_id>/tracks/<track_id>', methods=['DELETE'])
@owns_playlist('playlist_id', source='args')
def remove_track(playlist_id, track_id, payload, profile):
    """Remove a song from a playlist."""
    if not PlaylistStore(db.session).remove_track(playlist_id, track_id):
        raise NotFoundError('Track not in playlist')
    return ok(message='Track removed from playlist')
