"""Logging setup: log format, request access log, and query timing."""

import logging
import time

from flask import g, request
from sqlalchemy import event

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'

request_logger = logging.getLogger('tuneloop.request')
query_logger = logging.getLogger('tuneloop.db')


def configure_logging(level: str = 'INFO'):
    """
    Configure the root logger once.

    Args:
        level: Level name such as DEBUG or INFO
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def init_request_logging(app):
    """
    Log one access line per request.

    Usage:
        init_request_logging(app)
        # GET /api/songs 200 3.2ms
    """

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop('request_started', None)
        duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        request_logger.info(
            '%s %s %s %.1fms',
            request.method,
            request.full_path.rstrip('?'),
            response.status_code,
            duration_ms,
        )
        return response


def attach_query_logging(engine):
    """Log every executed statement with its duration at DEBUG level."""

    @event.listens_for(engine, 'before_cursor_execute')
    def _before_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault('query_start_time', []).append(time.perf_counter())

    @event.listens_for(engine, 'after_cursor_execute')
    def _after_execute(conn, cursor, statement, parameters, context, executemany):
        started = conn.info['query_start_time'].pop()
        if query_logger.isEnabledFor(logging.DEBUG):
            query_logger.debug(
                'Executed query in %.1fms (rows=%s): %s',
                (time.perf_counter() - started) * 1000,
                cursor.rowcount,
                ' '.join(statement.split()),
            )
