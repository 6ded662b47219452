"""
Health checks for monitoring.
"""

from datetime import datetime, timezone

import requests
from flask import Blueprint, current_app, jsonify

health_bp = Blueprint('health', __name__)


def check_api_connection():
    """
    Checks that the REST API answers at all. Any HTTP status counts as reachable.
    Returns (status: bool, message: str, response_time_ms: float)
    """
    start_time = datetime.now()
    base_url = current_app.config['API_URL']
    timeout = current_app.config.get('API_TIMEOUT', 10)

    try:
        response = requests.get(base_url, timeout=timeout)
        response_time = (datetime.now() - start_time).total_seconds() * 1000
        return True, f"API answered with HTTP {response.status_code}", response_time
    except requests.RequestException as e:
        response_time = (datetime.now() - start_time).total_seconds() * 1000
        return False, f"API unreachable: {e.__class__.__name__}", response_time


@health_bp.route('/health', methods=['GET'])
def health_check():
    api_status, api_message, api_response_time = check_api_connection()
    overall_status = "healthy" if api_status else "degraded"

    response = {
        "status": overall_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": current_app.config.get('APP_VERSION', '1.0.0'),
        "checks": {
            "api": {
                "status": "up" if api_status else "down",
                "message": api_message,
                "response_time_ms": round(api_response_time, 2),
            }
        },
    }
    return jsonify(response), 200 if api_status else 503


@health_bp.route('/health/live', methods=['GET'])
def liveness_check():
    """Liveness probe: the process is up and serving requests."""
    return jsonify({"status": "alive"}), 200
