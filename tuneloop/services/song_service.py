"""
Song Catalog & Like Ledger - search, feeds and per-profile likes.

Every listing returns SongWithLike dicts: the song's fields plus an
aggregate ``like_count`` and the viewer-relative ``is_liked`` flag.
"""

import logging

from sqlalchemy import case, func, or_
from sqlalchemy.orm import aliased

from tuneloop.models import Like, Song, insert_ignore
from tuneloop.utils import like_pattern

logger = logging.getLogger(__name__)


def like_columns(viewer_id=None):
    """
    Aggregate columns over an outer join to Like, grouped per song.

    Returns:
        (like_count, is_liked) column expressions
    """
    like_count = func.count(Like.id)
    if viewer_id:
        is_liked = func.max(case((Like.profile_id == viewer_id, 1), else_=0))
    else:
        is_liked = func.max(0)
    return like_count, is_liked


class SongCatalog:
    """Read-mostly access to songs and the like ledger."""

    def __init__(self, session):
        self.session = session

    # ==================== Helpers ====================

    def _with_likes(self, viewer_id=None):
        """Song query joined to likes and grouped per song."""
        like_count, is_liked = like_columns(viewer_id)
        query = (
            self.session.query(
                Song,
                like_count.label('like_count'),
                is_liked.label('is_liked'),
            )
            .outerjoin(Like, Like.song_id == Song.id)
            .group_by(Song.id)
        )
        return query, like_count

    @staticmethod
    def _serialize(rows):
        return [
            song.to_dict(like_count=count, is_liked=liked)
            for song, count, liked in rows
        ]

    # ==================== Lookup ====================

    def get_by_id(self, song_id):
        """Return a song by ID, or None."""
        if not song_id:
            return None
        return self.session.get(Song, song_id)

    # ==================== Search ====================

    def search_by_artist(self, term, viewer_id=None):
        """Case-insensitive substring match on artist, ordered by artist, title."""
        query, _ = self._with_likes(viewer_id)
        rows = (
            query
            .filter(func.lower(Song.artist).like(like_pattern(term), escape='\\'))
            .order_by(Song.artist, Song.title)
            .all()
        )
        return self._serialize(rows)

    def search_by_title(self, term, viewer_id=None):
        """Case-insensitive substring match on title, ordered by title."""
        query, _ = self._with_likes(viewer_id)
        rows = (
            query
            .filter(func.lower(Song.title).like(like_pattern(term), escape='\\'))
            .order_by(Song.title)
            .all()
        )
        return self._serialize(rows)

    def search(self, term, mode='all', viewer_id=None):
        """
        Search by artist, title, or either.

        Args:
            term: Substring to match
            mode: 'artist', 'title' or 'all'
            viewer_id: Profile whose like status is reported

        Returns:
            SongWithLike dicts; each song at most once
        """
        if mode == 'artist':
            return self.search_by_artist(term, viewer_id)
        if mode == 'title':
            return self.search_by_title(term, viewer_id)

        pattern = like_pattern(term)
        query, _ = self._with_likes(viewer_id)
        rows = (
            query
            .filter(or_(
                func.lower(Song.artist).like(pattern, escape='\\'),
                func.lower(Song.title).like(pattern, escape='\\'),
            ))
            .order_by(Song.artist, Song.title)
            .all()
        )
        return self._serialize(rows)

    def suggest(self, term, limit=8):
        """
        Autocomplete suggestions: matching artists first, then titles.

        The combined list is cut at ``limit``, so many matching artists
        can crowd out titles.
        """
        term = (term or '').strip()
        if not term:
            return []

        pattern = like_pattern(term)
        artists = (
            self.session.query(Song.artist)
            .filter(func.lower(Song.artist).like(pattern, escape='\\'))
            .distinct()
            .order_by(Song.artist)
            .limit(limit)
            .all()
        )
        titles = (
            self.session.query(Song.title)
            .filter(func.lower(Song.title).like(pattern, escape='\\'))
            .distinct()
            .order_by(Song.title)
            .limit(limit)
            .all()
        )

        suggestions = [{'type': 'artist', 'value': row[0]} for row in artists]
        suggestions += [{'type': 'title', 'value': row[0]} for row in titles]
        return suggestions[:limit]

    # ==================== Feeds ====================

    def list_all(self, viewer_id=None, limit=50):
        """Catalog feed, most liked first."""
        query, like_count = self._with_likes(viewer_id)
        rows = (
            query
            .order_by(like_count.desc(), Song.artist, Song.title)
            .limit(limit)
            .all()
        )
        return self._serialize(rows)

    def trending(self, viewer_id=None, limit=10):
        """Most liked songs, excluding songs nobody liked."""
        query, like_count = self._with_likes(viewer_id)
        rows = (
            query
            .having(like_count > 0)
            .order_by(like_count.desc(), Song.artist, Song.title)
            .limit(limit)
            .all()
        )
        return self._serialize(rows)

    # ==================== Likes ====================

    def like(self, profile_id, song_id):
        """Like a song (idempotent)."""
        inserted = insert_ignore(self.session, Like, profile_id=profile_id, song_id=song_id)
        self.session.commit()
        if inserted:
            logger.debug('Profile %s liked song %s', profile_id, song_id)

    def unlike(self, profile_id, song_id):
        """Unlike a song (idempotent)."""
        (
            self.session.query(Like)
            .filter_by(profile_id=profile_id, song_id=song_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()

    def liked_by_user(self, profile_id):
        """Songs a profile liked, most recent like first."""
        own_like = aliased(Like)
        rows = (
            self.session.query(Song, func.count(Like.id))
            .join(own_like, own_like.song_id == Song.id)
            .outerjoin(Like, Like.song_id == Song.id)
            .filter(own_like.profile_id == profile_id)
            .group_by(Song.id, own_like.created_at)
            .order_by(own_like.created_at.desc())
            .all()
        )
        return [song.to_dict(like_count=count, is_liked=True) for song, count in rows]
