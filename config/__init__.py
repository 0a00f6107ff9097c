"""
Configuration Module for TuneLoop.
Centralizes all app settings with environment variable support.
"""

import hashlib
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration with sensible defaults."""

    # Paths
    BASE_DIR = Path(__file__).parent.parent
    DATABASE_PATH = BASE_DIR / 'tuneloop.db'

    # Flask: stable fallback key derived from the DB path so it survives restarts
    _fallback_key = hashlib.sha256(
        f'tuneloop-secret-{Path(__file__).parent.parent / "tuneloop.db"}'.encode()
    ).hexdigest()
    SECRET_KEY = os.getenv('SECRET_KEY', _fallback_key)
    ENV = os.getenv('TUNELOOP_ENV', 'development')
    DEBUG = os.getenv('FLASK_DEBUG', 'false').lower() == 'true'

    # Server
    HOST = os.getenv('TUNELOOP_HOST', '0.0.0.0')
    PORT = int(os.getenv('TUNELOOP_PORT', '4000'))
    API_PREFIX = os.getenv('API_PREFIX', '/api')

    # Comma-separated list of frontend origins allowed by CORS
    CLIENT_URL = os.getenv('CLIENT_URL', 'http://localhost:5173')

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', f'sqlite:///{DATABASE_PATH}')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Seed the bundled song catalog on first start
    SEED_CATALOG = os.getenv('SEED_CATALOG', 'true').lower() == 'true'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Listing limits (default, maximum)
    FEED_LIMIT = (50, 100)
    TRENDING_LIMIT = (10, 50)
    SUGGEST_LIMIT = (8, 20)

    @classmethod
    def allowed_origins(cls):
        """Return the CORS origin allow-list."""
        return [url.strip() for url in cls.CLIENT_URL.split(',') if url.strip()]


# Create default instance
config = Config()
