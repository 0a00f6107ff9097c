"""Tests for utility functions and request parsers."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tuneloop.exceptions import ValidationError
from tuneloop.utils import clamp_limit, clean_text, is_valid_uuid, like_pattern
from tuneloop.validators import (
    parse_add_track,
    parse_owner_action,
    parse_playlist_input,
    parse_profile_input,
    parse_search_args,
)

TRACK_ID = 'a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11'


class TestIsValidUuid:
    """Test UUID validation."""

    def test_canonical_uuid(self):
        assert is_valid_uuid(TRACK_ID)
        assert is_valid_uuid(TRACK_ID.upper())

    def test_invalid_inputs(self):
        assert not is_valid_uuid('')
        assert not is_valid_uuid(None)
        assert not is_valid_uuid(42)
        assert not is_valid_uuid('not-a-uuid')
        assert not is_valid_uuid('a0eebc999c0b4ef8bb6d6bb9bd380a11')


class TestClampLimit:
    """Test listing limit parsing."""

    def test_valid_values(self):
        assert clamp_limit('5', 10, 50) == 5
        assert clamp_limit(20, 10, 50) == 20

    def test_missing_or_garbage_uses_default(self):
        assert clamp_limit(None, 10, 50) == 10
        assert clamp_limit('abc', 10, 50) == 10

    def test_bounds(self):
        assert clamp_limit('0', 10, 50) == 1
        assert clamp_limit('-3', 10, 50) == 1
        assert clamp_limit('500', 10, 50) == 50


class TestLikePattern:
    """Test LIKE pattern building."""

    def test_lowercases_and_wraps(self):
        assert like_pattern('Queen') == '%queen%'

    def test_escapes_wildcards(self):
        assert like_pattern('100%') == '%100\\%%'
        assert like_pattern('a_b') == '%a\\_b%'


class TestCleanText:
    def test_strips_strings(self):
        assert clean_text('  hi  ') == 'hi'

    def test_non_strings_become_empty(self):
        assert clean_text(None) == ''
        assert clean_text(123) == ''


class TestParseProfileInput:
    """Test profile registration validation."""

    def test_valid(self):
        data = parse_profile_input({
            'username': ' alice_01 ',
            'displayName': ' Alice ',
            'bio': ' hi ',
        })
        assert data == {
            'username': 'alice_01',
            'display_name': 'Alice',
            'bio': 'hi',
            'avatar_url': '',
        }

    @pytest.mark.parametrize('username', ['', 'ab', 'a' * 51, 'bad name', 'dash-name', None])
    def test_invalid_username(self, username):
        with pytest.raises(ValidationError):
            parse_profile_input({'username': username, 'displayName': 'X'})

    def test_username_boundaries(self):
        assert parse_profile_input({'username': 'abc', 'displayName': 'X'})['username'] == 'abc'
        long_name = 'a' * 50
        assert parse_profile_input({'username': long_name, 'displayName': 'X'})['username'] == long_name

    def test_display_name_required(self):
        with pytest.raises(ValidationError, match='Display name'):
            parse_profile_input({'username': 'alice', 'displayName': '   '})


class TestParsePlaylistInput:
    """Test playlist creation validation."""

    def test_valid_trims_and_defaults(self):
        data = parse_playlist_input({'username': 'alice', 'name': '  Road Trip  '})
        assert data == {'username': 'alice', 'name': 'Road Trip', 'description': ''}

    def test_missing_username(self):
        with pytest.raises(ValidationError, match='Username'):
            parse_playlist_input({'name': 'Road Trip'})

    def test_missing_name(self):
        with pytest.raises(ValidationError, match='name'):
            parse_playlist_input({'username': 'alice'})

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            parse_playlist_input({'username': 'alice', 'name': 'x' * 201})
        assert parse_playlist_input({'username': 'alice', 'name': 'x' * 200})['name'] == 'x' * 200

    def test_description_limits(self):
        with pytest.raises(ValidationError):
            parse_playlist_input({'username': 'alice', 'name': 'A', 'description': 'd' * 1001})
        with pytest.raises(ValidationError):
            parse_playlist_input({'username': 'alice', 'name': 'A', 'description': 7})


class TestParseTrackAndOwnerActions:
    def test_add_track_valid(self):
        data = parse_add_track({'trackId': TRACK_ID, 'username': 'alice'})
        assert data == {'username': 'alice', 'track_id': TRACK_ID}

    def test_add_track_canonicalizes_id(self):
        data = parse_add_track({'trackId': TRACK_ID.upper(), 'username': 'alice'})
        assert data['track_id'] == TRACK_ID

    def test_add_track_invalid_id(self):
        with pytest.raises(ValidationError, match='Invalid track ID'):
            parse_add_track({'trackId': 'nope', 'username': 'alice'})

    def test_add_track_missing_username(self):
        with pytest.raises(ValidationError):
            parse_add_track({'trackId': TRACK_ID})

    def test_owner_action(self):
        assert parse_owner_action({'username': 'bob'}) == {'username': 'bob'}
        with pytest.raises(ValidationError):
            parse_owner_action({})


class TestParseSearchArgs:
    def test_defaults_to_all(self):
        assert parse_search_args({'q': ' queen '}) == {'q': 'queen', 'by': 'all'}

    def test_modes(self):
        assert parse_search_args({'q': 'x', 'by': 'artist'})['by'] == 'artist'
        assert parse_search_args({'q': 'x', 'by': 'title'})['by'] == 'title'

    def test_missing_query(self):
        with pytest.raises(ValidationError):
            parse_search_args({'q': '  '})

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            parse_search_args({'q': 'x', 'by': 'album'})


class TestUtcnow:
    def test_naive_utc(self):
        from datetime import datetime, timezone
        from tuneloop.models import utcnow

        now = utcnow()
        assert now.tzinfo is None
        drift = datetime.now(timezone.utc).replace(tzinfo=None) - now
        assert abs(drift.total_seconds()) < 5
