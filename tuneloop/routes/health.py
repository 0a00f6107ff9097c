"""
Health Routes - liveness and database round trip.
"""

import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from tuneloop.models import check_connection

bp = Blueprint('health', __name__)

# ─── Server boot timestamp (for uptime calculation) ─────────────────────────
_SERVER_START_TIME = time.time()


@bp.route('/health', methods=['GET'])
def health():
    """Report liveness and database latency."""
    connected, latency_ms = check_connection()
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'uptime': round(time.time() - _SERVER_START_TIME, 3),
        'environment': current_app.config.get('ENV_NAME', 'development'),
        'database': 'connected' if connected else 'disconnected',
        'dbLatencyMs': latency_ms,
    })
