"""
Database initialization and SQLAlchemy instance.
"""

import logging
import sqlite3
import time
import uuid
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

db = SQLAlchemy()


def utcnow():
    """Naive UTC timestamp used for every stored datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id():
    """Generate a UUID primary key."""
    return str(uuid.uuid4())


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def init_db(app):
    """Initialize database with Flask app."""
    db.init_app(app)

    with app.app_context():
        # Import models to register them
        from . import profile, song, like, playlist

        from tuneloop.logger import attach_query_logging
        attach_query_logging(db.engine)

        # Create all tables
        db.create_all()


def insert_ignore(session, model, **values):
    """
    Insert a row, treating a uniqueness conflict as a no-op.

    Args:
        session: SQLAlchemy session
        model: Mapped class to insert into
        **values: Column values

    Returns:
        True if a row was inserted, False if it already existed
    """
    dialect = session.get_bind().dialect.name

    if dialect == 'sqlite':
        from sqlalchemy.dialects.sqlite import insert
    elif dialect == 'postgresql':
        from sqlalchemy.dialects.postgresql import insert
    else:
        insert = None

    if insert is not None:
        stmt = insert(model.__table__).values(**values).on_conflict_do_nothing()
        result = session.execute(stmt)
        return result.rowcount > 0

    if session.query(model).filter_by(**values).first() is not None:
        return False
    session.add(model(**values))
    session.flush()
    return True


def check_connection():
    """
    Run a round trip against the database.

    Returns:
        (connected, latency_ms)
    """
    start = time.perf_counter()
    try:
        db.session.execute(text('SELECT 1'))
        connected = True
    except SQLAlchemyError as e:
        logger.error('Database connection test failed: %s', e)
        db.session.rollback()
        connected = False
    latency_ms = round((time.perf_counter() - start) * 1000, 2)
    return connected, latency_ms
