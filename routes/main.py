"""
routes/main.py — State snapshot routes and shared route helpers.

Provides:
- GET / — Planner state (session + gardens)
- GET /api/state — Same snapshot, for polling clients
- GET /api/csrf-token — Token to send as X-CSRFToken on POST requests
"""

from flask import Blueprint, current_app, jsonify
from flask_wtf.csrf import generate_csrf

main_bp = Blueprint('main', __name__)


def get_planner():
    """The GardenPlanner owned by the running app."""
    return current_app.extensions['garden_planner']


def error_response(message, status):
    return jsonify({'success': False, 'error': message}), status


def state_response(**extra):
    payload = {'success': True}
    payload.update(extra)
    payload['state'] = get_planner().state()
    return jsonify(payload)


@main_bp.route('/')
def index():
    """Planner state snapshot."""
    return state_response()


@main_bp.route('/api/state')
def api_state():
    """Planner state snapshot (JSON API)."""
    return state_response()


@main_bp.route('/api/csrf-token')
def csrf_token():
    """CSRF token for clients posting JSON."""
    return jsonify({'success': True, 'csrf_token': generate_csrf()})
