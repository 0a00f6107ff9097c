"""
TuneLoop - music discovery API

Flask application factory and initialization.
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import config

__version__ = '1.0.0'

_log = logging.getLogger(__name__)


def _bootstrap_catalog(app):
    """Seed the song catalog on first run."""
    with app.app_context():
        from tuneloop.catalog import seed_catalog
        from tuneloop.models import db

        seed_catalog(db.session)


def _register_error_handlers(app):
    """Translate exceptions into the ``{status: "error", message}`` envelope."""
    from tuneloop.exceptions import InternalError, TuneLoopError
    from tuneloop.models import db

    def _error_response(message, status_code):
        return jsonify({'status': 'error', 'message': message}), status_code

    @app.errorhandler(TuneLoopError)
    def handle_app_error(error):
        app.logger.warning('%s: %s', type(error).__name__, error.message)
        return _error_response(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        message = 'Route not found' if error.code == 404 else error.description
        return _error_response(message, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception('Unhandled error: %s', error)
        db.session.rollback()
        internal = InternalError()
        return _error_response(internal.message, internal.status_code)


def create_app(testing=False, database_uri=None):
    """Create and configure the Flask application."""

    from tuneloop.logger import configure_logging, init_request_logging
    configure_logging(config.LOG_LEVEL)

    app = Flask(__name__)

    app.config['TESTING'] = testing

    # Configuration
    app.config['SECRET_KEY'] = config.SECRET_KEY
    app.config['ENV_NAME'] = 'test' if testing else config.ENV
    app.config['SQLALCHEMY_DATABASE_URI'] = database_uri or config.SQLALCHEMY_DATABASE_URI
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.json.sort_keys = False

    # CORS for the single-page frontend
    CORS(app, origins=config.allowed_origins())

    # Initialize database
    from tuneloop.models import init_db
    init_db(app)

    init_request_logging(app)
    _register_error_handlers(app)

    # Bootstrap catalog on first run
    if config.SEED_CATALOG and not testing:
        _bootstrap_catalog(app)

    # Register blueprints
    from tuneloop.routes import health_bp, playlists_bp, profiles_bp, songs_bp

    prefix = config.API_PREFIX.rstrip('/') or None
    app.register_blueprint(health_bp, url_prefix=prefix)
    app.register_blueprint(profiles_bp, url_prefix=prefix)
    app.register_blueprint(songs_bp, url_prefix=prefix)
    app.register_blueprint(playlists_bp, url_prefix=prefix)

    @app.route('/')
    def index():
        return jsonify({
            'name': 'TuneLoop API',
            'version': __version__,
            'status': 'running',
            'docs': f'{prefix or ""}/health',
        })

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response

    _log.info('TuneLoop app created (%s)', app.config['ENV_NAME'])
    return app


from .exceptions import (
    TuneLoopError,
    ValidationError,
    NotFoundError,
    ForbiddenError,
    ConflictError,
    InternalError,
)

__all__ = [
    'create_app',
    'TuneLoopError',
    'ValidationError',
    'NotFoundError',
    'ForbiddenError',
    'ConflictError',
    'InternalError',
]
