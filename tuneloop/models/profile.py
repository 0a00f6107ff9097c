"""
Profile model - user identity keyed by a unique username.
"""

from tuneloop.utils import isoformat

from .database import db, new_id, utcnow


class Profile(db.Model):
    """A TuneLoop listener profile."""

    __tablename__ = 'profiles'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    username = db.Column(db.String(50), nullable=False, unique=True, index=True)
    display_name = db.Column(db.String(100), nullable=False)
    bio = db.Column(db.String(500), nullable=False, default='')
    avatar_url = db.Column(db.String(500), nullable=False, default='')
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        """Serialize profile for API responses."""
        return {
            'id': self.id,
            'username': self.username,
            'display_name': self.display_name,
            'bio': self.bio,
            'avatar_url': self.avatar_url,
            'created_at': isoformat(self.created_at),
        }
