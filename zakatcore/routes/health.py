"""Health check endpoint."""
from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)


@health_bp.route('/healthz')
def healthz():
    """Return health status and the number of loaded methodologies."""
    registry = current_app.extensions['methodology_registry']
    return jsonify({'status': 'ok', 'methodologies': len(registry)})
