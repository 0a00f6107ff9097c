"""
Playlist models for grouping catalog songs.
"""

from tuneloop.utils import isoformat

from .database import db, new_id, utcnow


class Playlist(db.Model):
    """Profile-owned playlist."""

    __tablename__ = 'playlists'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    user_id = db.Column(
        db.String(36),
        db.ForeignKey('profiles.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(1000), default='', nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    def to_dict(self, track_count=0):
        """Serialize playlist for API responses."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
            'track_count': int(track_count or 0),
        }


class PlaylistTrack(db.Model):
    """Mapping between playlist and catalog song."""

    __tablename__ = 'playlist_tracks'
    __table_args__ = (
        db.UniqueConstraint('playlist_id', 'track_id', name='uq_playlist_track'),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    playlist_id = db.Column(
        db.String(36),
        db.ForeignKey('playlists.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    track_id = db.Column(
        db.String(36),
        db.ForeignKey('songs.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    added_at = db.Column(db.DateTime, default=utcnow, nullable=False)
