"""
Song model for the read-only catalog.
"""

from tuneloop.utils import isoformat

from .database import db, new_id, utcnow


class Song(db.Model):
    """Represents a catalog track."""

    __tablename__ = 'songs'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.String(300), nullable=False, index=True)
    artist = db.Column(db.String(200), nullable=False, index=True)
    album = db.Column(db.String(300), nullable=False, default='')
    genre = db.Column(db.String(100), nullable=False, default='')
    cover_url = db.Column(db.String(500), nullable=False, default='')
    duration_ms = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self, like_count=None, is_liked=None):
        """
        Convert to dictionary for JSON response.

        When like_count is given the song is decorated as a SongWithLike.
        """
        data = {
            'id': self.id,
            'title': self.title,
            'artist': self.artist,
            'album': self.album,
            'genre': self.genre,
            'cover_url': self.cover_url,
            'duration_ms': self.duration_ms,
            'created_at': isoformat(self.created_at),
        }
        if like_count is not None:
            data['like_count'] = int(like_count)
            data['is_liked'] = bool(is_liked)
        return data
