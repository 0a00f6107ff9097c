"""
Like model - tracks which profiles liked which songs.
"""

from .database import db, new_id, utcnow


class Like(db.Model):
    """A profile's like on a song."""

    __tablename__ = 'likes'
    __table_args__ = (
        db.UniqueConstraint('profile_id', 'song_id', name='uq_profile_song_like'),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    profile_id = db.Column(
        db.String(36),
        db.ForeignKey('profiles.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    song_id = db.Column(
        db.String(36),
        db.ForeignKey('songs.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
