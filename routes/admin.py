# routes/admin.py
import hmac
import logging
from functools import wraps

from flask import Blueprint, current_app, jsonify, request, session
from pymongo.errors import PyMongoError

from services.analytics_service import build_dashboard, filter_by_team, submission_row

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin_bp', __name__)

ADMIN_SESSION_KEY = 'admin_session'


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not session.get(ADMIN_SESSION_KEY):
            return jsonify({"error": "Unauthorized"}), 401
        return view(*args, **kwargs)
    return wrapped


def _repository():
    return current_app.extensions['quiz']['repository']


@admin_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON in request body"}), 400

    expected = current_app.config.get('ADMIN_PASSWORD')
    if not expected:
        logger.error("ADMIN_PASSWORD is not configured")
        return jsonify({"error": "Server configuration error"}), 500

    password = data.get('password')
    if not isinstance(password, str) or not hmac.compare_digest(
            password.encode('utf-8'), expected.encode('utf-8')):
        logger.warning("Failed admin login attempt")
        return jsonify({"error": "Invalid password"}), 401

    session.permanent = True
    session[ADMIN_SESSION_KEY] = True
    logger.info("Admin logged in")
    return jsonify({"success": True})


@admin_bp.route('/logout', methods=['POST'])
def logout():
    session.pop(ADMIN_SESSION_KEY, None)
    return jsonify({"success": True})


@admin_bp.route('/submissions', methods=['GET'])
@admin_required
def list_submissions():
    team = request.args.get('team')
    try:
        submissions = [s.to_dict() for s in _repository().list_all()]
    except PyMongoError:
        logger.exception("Failed to fetch submissions")
        return jsonify({"error": "Failed to fetch submissions"}), 500

    rows = [submission_row(s) for s in filter_by_team(submissions, team)]
    return jsonify({"success": True, "submissions": rows})


@admin_bp.route('/dashboard', methods=['GET'])
@admin_required
def dashboard():
    team = request.args.get('team')
    try:
        submissions = [s.to_dict() for s in _repository().list_all()]
    except PyMongoError:
        logger.exception("Failed to build dashboard")
        return jsonify({"error": "Failed to fetch submissions"}), 500

    return jsonify({"success": True, "dashboard": build_dashboard(submissions, team)})


@admin_bp.route('/clear-data', methods=['DELETE'])
@admin_required
def clear_data():
    try:
        deleted_count = _repository().delete_all()
    except PyMongoError:
        logger.exception("Failed to clear submissions")
        return jsonify({"error": "Failed to clear data"}), 500

    logger.info(f"Admin cleared {deleted_count} submissions")
    return jsonify({
        "success": True,
        "message": f"Successfully deleted {deleted_count} submission(s)",
        "deleted_count": deleted_count
    })
