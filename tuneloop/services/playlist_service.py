"""
Playlist Store - playlists, track membership and ownership checks.

No method here performs authorization. Routes must call ``is_owner``
before ``delete``, ``add_track`` or ``remove_track``.
"""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from tuneloop.models import Like, Playlist, PlaylistTrack, Song, insert_ignore, utcnow
from tuneloop.utils import isoformat

from .song_service import like_columns

logger = logging.getLogger(__name__)


class PlaylistStore:
    """Playlist persistence over an injected session."""

    def __init__(self, session):
        self.session = session

    def _with_track_count(self):
        track_count = func.count(PlaylistTrack.id)
        return (
            self.session.query(Playlist, track_count.label('track_count'))
            .outerjoin(PlaylistTrack, PlaylistTrack.playlist_id == Playlist.id)
            .group_by(Playlist.id)
        )

    def _touch(self, playlist_id):
        """Advance the playlist's last-modified timestamp."""
        (
            self.session.query(Playlist)
            .filter_by(id=playlist_id)
            .update({Playlist.updated_at: utcnow()}, synchronize_session=False)
        )

    # ==================== Playlist CRUD ====================

    def create(self, owner_id, name, description=''):
        """Create an empty playlist; name and description arrive trimmed."""
        now = utcnow()
        playlist = Playlist(
            user_id=owner_id,
            name=name,
            description=description or '',
            created_at=now,
            updated_at=now,
        )
        self.session.add(playlist)
        self.session.commit()
        logger.info('Created playlist %s for profile %s', playlist.id, owner_id)
        return playlist.to_dict(track_count=0)

    def list_by_user(self, owner_id):
        """Playlists owned by a profile, most recently modified first."""
        rows = (
            self._with_track_count()
            .filter(Playlist.user_id == owner_id)
            .order_by(Playlist.updated_at.desc())
            .all()
        )
        return [playlist.to_dict(track_count=count) for playlist, count in rows]

    def get_by_id(self, playlist_id, viewer_id=None):
        """
        Playlist detail with its tracks, or None if it does not exist.

        Args:
            playlist_id: Playlist to load
            viewer_id: Profile whose like status is reported per track

        Returns:
            Playlist dict with a ``tracks`` list, newest additions first
        """
        row = self._with_track_count().filter(Playlist.id == playlist_id).first()
        if row is None:
            return None
        playlist, track_count = row

        like_count, is_liked = like_columns(viewer_id)
        entries = (
            self.session.query(Song, PlaylistTrack.added_at, like_count, is_liked)
            .join(PlaylistTrack, PlaylistTrack.track_id == Song.id)
            .outerjoin(Like, Like.song_id == Song.id)
            .filter(PlaylistTrack.playlist_id == playlist_id)
            .group_by(Song.id, PlaylistTrack.added_at)
            .order_by(PlaylistTrack.added_at.desc())
            .all()
        )

        tracks = []
        for song, added_at, count, liked in entries:
            track = song.to_dict(like_count=count, is_liked=liked)
            track['added_at'] = isoformat(added_at)
            tracks.append(track)

        data = playlist.to_dict(track_count=track_count)
        data['tracks'] = tracks
        return data

    def delete(self, playlist_id):
        """Delete playlist and all memberships. Returns whether it existed."""
        (
            self.session.query(PlaylistTrack)
            .filter_by(playlist_id=playlist_id)
            .delete(synchronize_session=False)
        )
        deleted = (
            self.session.query(Playlist)
            .filter_by(id=playlist_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        if deleted:
            logger.info('Deleted playlist %s', playlist_id)
        return deleted > 0

    # ==================== Track Membership ====================

    def add_track(self, playlist_id, track_id):
        """
        Add a song to a playlist (idempotent) and touch updated_at.

        The insert and the touch commit together; a failed insert leaves
        the playlist untouched.

        Raises:
            IntegrityError: playlist or song does not exist
        """
        try:
            inserted = insert_ignore(
                self.session, PlaylistTrack,
                playlist_id=playlist_id, track_id=track_id,
            )
            self._touch(playlist_id)
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning('Rejected membership %s -> %s', playlist_id, track_id)
            raise

        if not inserted:
            logger.debug('Track %s already in playlist %s', track_id, playlist_id)

    def remove_track(self, playlist_id, track_id):
        """Remove a song from a playlist. Returns whether a row was removed."""
        removed = (
            self.session.query(PlaylistTrack)
            .filter_by(playlist_id=playlist_id, track_id=track_id)
            .delete(synchronize_session=False)
        )
        if not removed:
            self.session.rollback()
            return False

        self._touch(playlist_id)
        self.session.commit()
        return True

    # ==================== Ownership ====================

    def is_owner(self, playlist_id, profile_id):
        """True if the playlist exists and belongs to the profile."""
        if not playlist_id or not profile_id:
            return False
        return (
            self.session.query(Playlist.id)
            .filter_by(id=playlist_id, user_id=profile_id)
            .first()
        ) is not None
