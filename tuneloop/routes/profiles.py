"""
Profile Routes - registration and lookup.
"""

from flask import Blueprint

from tuneloop.exceptions import ConflictError, NotFoundError
from tuneloop.models import db
from tuneloop.services import ProfileDirectory
from tuneloop.utils import ok
from tuneloop.validators import json_body, parse_profile_input

bp = Blueprint('profiles', __name__)


@bp.route('/profile', methods=['GET'])
def list_profiles():
    """Return all profiles, newest first."""
    profiles = ProfileDirectory(db.session).list_all()
    return ok([p.to_dict() for p in profiles])


@bp.route('/profile/<username>', methods=['GET'])
def get_profile(username):
    """Return a single profile."""
    profile = ProfileDirectory(db.session).find_by_username(username.strip())
    if not profile:
        raise NotFoundError('Profile not found')
    return ok(profile.to_dict())


@bp.route('/profile', methods=['POST'])
def create_profile():
    """Register a new profile."""
    data = parse_profile_input(json_body())

    directory = ProfileDirectory(db.session)
    if directory.find_by_username(data['username']):
        raise ConflictError('Username already taken')

    profile = directory.create(**data)
    return ok(profile.to_dict(), status=201)
