#!/usr/bin/env python3
"""
TuneLoop CLI - database management commands.

Usage:
    python manage.py init-db
    python manage.py seed
    python manage.py check-db

Reads DATABASE_URL from env vars (or .env file).
"""

import sys


def _make_app():
    from tuneloop import create_app
    return create_app()


def init_db():
    """Create all tables (create_app does this on startup)."""
    app = _make_app()
    print(f"✅ Tables ready at {app.config['SQLALCHEMY_DATABASE_URI']}")


def seed():
    """Insert the bundled song catalog if the songs table is empty."""
    app = _make_app()

    with app.app_context():
        from tuneloop.catalog import seed_catalog
        from tuneloop.models import db

        inserted = seed_catalog(db.session)
        if inserted:
            print(f"✅ Seeded {inserted} songs")
        else:
            print("ℹ️  Catalog already has songs, nothing to seed")


def check_db():
    """Report connectivity, latency and row counts."""
    app = _make_app()

    with app.app_context():
        from tuneloop.models import Like, Playlist, PlaylistTrack, Profile, Song, check_connection

        connected, latency_ms = check_connection()
        if not connected:
            print(f"❌ Database unreachable ({latency_ms}ms)")
            sys.exit(1)

        print(f"✅ Connected in {latency_ms}ms")
        for model in (Profile, Song, Like, Playlist, PlaylistTrack):
            print(f"   {model.__tablename__}: {model.query.count()}")


COMMANDS = {
    'init-db': (init_db, 'Create database tables'),
    'seed': (seed, 'Seed the song catalog'),
    'check-db': (check_db, 'Check database connection and row counts'),
}


def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command>")
        print("Commands:")
        for name, (_, help_text) in COMMANDS.items():
            print(f"  {name:<10} {help_text}")
        sys.exit(1)

    command = sys.argv[1]

    if command not in COMMANDS:
        print(f"❌ Unknown command: {command}")
        sys.exit(1)

    COMMANDS[command][0]()


if __name__ == '__main__':
    main()
