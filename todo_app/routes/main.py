"""
Main Routes

FLOW OVERVIEW
- /health [GET]
  • JSON health check including the stored to-do count; 503 when the
    database is unreachable.
- /metrics [GET]
  • Prometheus text exposition.
"""

from flask import Blueprint, Response, current_app, jsonify
from datetime import datetime, timezone
from ..errors import StorageError
from ..utils.prom_metrics import metrics_latest, CONTENT_TYPE_LATEST

main_bp = Blueprint('main', __name__)

@main_bp.route('/health')
def health():
    """Health check endpoint"""
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        todo_count = current_app.todo_service.store.count()
    except StorageError:
        return jsonify({'status': 'unhealthy', 'database': 'unreachable',
                        'timestamp': timestamp}), 503
    return jsonify({'status': 'healthy', 'database': 'ok', 'todos': todo_count,
                    'timestamp': timestamp})

@main_bp.route('/metrics')
def metrics():
    """Prometheus metrics endpoint."""
    output = metrics_latest()
    return Response(output, mimetype=CONTENT_TYPE_LATEST)
