"""
Profile Directory - resolves usernames to profiles.
"""

import logging

from sqlalchemy.exc import IntegrityError

from tuneloop.exceptions import ConflictError
from tuneloop.models import Profile

logger = logging.getLogger(__name__)


class ProfileDirectory:
    """Lookup and registration of profiles over an injected session."""

    def __init__(self, session):
        self.session = session

    def find_by_username(self, username):
        """Return the profile with this exact username, or None."""
        if not username:
            return None
        return self.session.query(Profile).filter_by(username=username).first()

    def create(self, username, display_name, bio='', avatar_url=''):
        """
        Register a new profile.

        Input is validated by the caller. The unique key on username is the
        only guard here.

        Raises:
            ConflictError: username already exists
        """
        profile = Profile(
            username=username,
            display_name=display_name,
            bio=bio or '',
            avatar_url=avatar_url or '',
        )
        self.session.add(profile)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError('Username already taken')

        logger.info('Created profile %s', profile.username)
        return profile

    def list_all(self):
        """All profiles, newest first."""
        return (
            self.session.query(Profile)
            .order_by(Profile.created_at.desc())
            .all()
        )
