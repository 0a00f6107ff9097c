"""
Bundled song catalog used to seed an empty database.
"""

import logging

from tuneloop.models import Song

logger = logging.getLogger(__name__)

SEED_SONGS = [
    {'title': 'Bohemian Rhapsody', 'artist': 'Queen', 'album': 'A Night at the Opera',
     'genre': 'Rock', 'duration_ms': 354000},
    {'title': "Don't Stop Me Now", 'artist': 'Queen', 'album': 'Jazz',
     'genre': 'Rock', 'duration_ms': 209000},
    {'title': 'Under Pressure', 'artist': 'Queen & David Bowie', 'album': 'Hot Space',
     'genre': 'Rock', 'duration_ms': 248000},
    {'title': 'Heroes', 'artist': 'David Bowie', 'album': '"Heroes"',
     'genre': 'Rock', 'duration_ms': 371000},
    {'title': 'Billie Jean', 'artist': 'Michael Jackson', 'album': 'Thriller',
     'genre': 'Pop', 'duration_ms': 294000},
    {'title': 'Superstition', 'artist': 'Stevie Wonder', 'album': 'Talking Book',
     'genre': 'Funk', 'duration_ms': 266000},
    {'title': 'Smells Like Teen Spirit', 'artist': 'Nirvana', 'album': 'Nevermind',
     'genre': 'Grunge', 'duration_ms': 301000},
    {'title': 'Dreams', 'artist': 'Fleetwood Mac', 'album': 'Rumours',
     'genre': 'Rock', 'duration_ms': 257000},
    {'title': 'Hey Jude', 'artist': 'The Beatles', 'album': 'Hey Jude',
     'genre': 'Rock', 'duration_ms': 431000},
    {'title': 'Blinding Lights', 'artist': 'The Weeknd', 'album': 'After Hours',
     'genre': 'Synth-pop', 'duration_ms': 200000},
    {'title': 'Levitating', 'artist': 'Dua Lipa', 'album': 'Future Nostalgia',
     'genre': 'Pop', 'duration_ms': 203000},
    {'title': 'Bad Guy', 'artist': 'Billie Eilish', 'album': 'When We All Fall Asleep, Where Do We Go?',
     'genre': 'Pop', 'duration_ms': 194000},
    {'title': 'Redbone', 'artist': 'Childish Gambino', 'album': 'Awaken, My Love!',
     'genre': 'R&B', 'duration_ms': 327000},
    {'title': 'HUMBLE.', 'artist': 'Kendrick Lamar', 'album': 'DAMN.',
     'genre': 'Hip-Hop', 'duration_ms': 177000},
    {'title': 'Get Lucky', 'artist': 'Daft Punk', 'album': 'Random Access Memories',
     'genre': 'Electronic', 'duration_ms': 369000},
    {'title': 'Paranoid Android', 'artist': 'Radiohead', 'album': 'OK Computer',
     'genre': 'Alternative', 'duration_ms': 387000},
]


def seed_catalog(session, songs=None):
    """
    Insert the bundled catalog if the songs table is empty.

    Args:
        session: SQLAlchemy session
        songs: Optional list of song dicts overriding SEED_SONGS

    Returns:
        Number of songs inserted
    """
    if session.query(Song.id).first() is not None:
        return 0

    rows = [Song(**item) for item in (songs or SEED_SONGS)]
    session.add_all(rows)
    session.commit()
    logger.info('Seeded %d songs into the catalog', len(rows))
    return len(rows)
