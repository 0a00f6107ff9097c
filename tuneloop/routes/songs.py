"""
Song Routes - feed, trending, search, autocomplete and likes.
"""

from flask import Blueprint, request

from config import config
from tuneloop.auth import resolve_profile, resolve_viewer_id
from tuneloop.exceptions import NotFoundError
from tuneloop.models import db
from tuneloop.services import SongCatalog
from tuneloop.utils import clamp_limit, ok
from tuneloop.validators import json_body, parse_owner_action, parse_search_args

bp = Blueprint('songs', __name__)


# ==================== Browse ====================

@bp.route('/songs', methods=['GET'])
def feed():
    """Catalog feed ordered by popularity."""
    viewer_id = resolve_viewer_id(request.args.get('username', '').strip())
    limit = clamp_limit(request.args.get('limit'), *config.FEED_LIMIT)
    return ok(SongCatalog(db.session).list_all(viewer_id, limit=limit))


@bp.route('/songs/trending', methods=['GET'])
def trending():
    """Top liked songs."""
    viewer_id = resolve_viewer_id(request.args.get('username', '').strip())
    limit = clamp_limit(request.args.get('limit'), *config.TRENDING_LIMIT)
    return ok(SongCatalog(db.session).trending(viewer_id, limit=limit))


@bp.route('/songs/suggest', methods=['GET'])
def suggest():
    """Autocomplete artists and titles."""
    term = request.args.get('q', '')
    limit = clamp_limit(request.args.get('limit'), *config.SUGGEST_LIMIT)
    return ok(SongCatalog(db.session).suggest(term, limit=limit))


@bp.route('/songs/search', methods=['GET'])
def search():
    """Search songs by artist, title or both."""
    args = parse_search_args(request.args)
    viewer_id = resolve_viewer_id(request.args.get('username', '').strip())
    songs = SongCatalog(db.session).search(args['q'], args['by'], viewer_id)
    return ok(songs)


# ==================== Likes ====================

def _resolve_like_target(song_id):
    """Validate body, profile and song for like/unlike."""
    payload = parse_owner_action(json_body())
    profile = resolve_profile(payload['username'])

    catalog = SongCatalog(db.session)
    if not catalog.get_by_id(song_id):
        raise NotFoundError('Song not found')
    return catalog, profile


@bp.route('/songs/<song_id>/like', methods=['POST'])
def like_song(song_id):
    """Like a song (idempotent)."""
    catalog, profile = _resolve_like_target(song_id)
    catalog.like(profile.id, song_id)
    return ok(message='Song liked')


@bp.route('/songs/<song_id>/like', methods=['DELETE'])
def unlike_song(song_id):
    """Unlike a song (idempotent)."""
    catalog, profile = _resolve_like_target(song_id)
    catalog.unlike(profile.id, song_id)
    return ok(message='Song unliked')


@bp.route('/songs/liked/<username>', methods=['GET'])
def liked_songs(username):
    """Songs liked by a profile, most recent first."""
    profile = resolve_profile(username.strip())
    return ok(SongCatalog(db.session).liked_by_user(profile.id))
