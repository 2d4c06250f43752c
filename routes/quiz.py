# routes/quiz.py
import hmac
import logging

from flask import Blueprint, current_app, jsonify, request
from pymongo.errors import PyMongoError

from models.submission import Submission
from questions.role_playbooks import get_role_playbook, get_role_playbook_by_string, recommendations_for
from questions.role_software import get_role_software, get_role_software_by_string
from services.submission_validator import SubmissionValidationError, validate_submission
from utils import get_ip_address, hash_ip, is_valid_uuid

logger = logging.getLogger(__name__)

quiz_bp = Blueprint('quiz_bp', __name__)

# Stored fields that never leave the server on the public result endpoint
PRIVATE_FIELDS = ('ip_hash', 'user_agent')


def _services():
    return current_app.extensions['quiz']


def _access_code_matches(data):
    expected = current_app.config.get('QUIZ_ACCESS_CODE')
    if not expected:
        return True
    provided = data.get('access_code') if isinstance(data, dict) else None
    if not isinstance(provided, str):
        return False
    return hmac.compare_digest(provided.encode('utf-8'), expected.encode('utf-8'))


@quiz_bp.route('/questions', methods=['GET'])
def get_questions():
    service = _services()['scoring_service']
    client_questions = [service.prepare_question_for_client(q) for q in service.get_questions()]
    return jsonify({
        "success": True,
        "questions": client_questions,
        "roles": service.get_roles()
    })


@quiz_bp.route('/bonus-questions', methods=['POST'])
def get_bonus_questions():
    """
    Expected payload:
    {
      responses: {question_id: answer, ...},   # core answers so far
      name: optional str, used to seed the selection
    }
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON in request body"}), 400

    responses = data.get('responses')
    if not isinstance(responses, dict):
        return jsonify({"error": "Missing responses"}), 400

    services = _services()
    service = services['scoring_service']
    selector = services['bonus_selector']

    name = data.get('name')
    seed = name.strip() if isinstance(name, str) and name.strip() else None

    preliminary = service.score(responses)
    bonus_ids = selector.select(preliminary.totals, seed=seed)
    questions = [service.prepare_question_for_client(q) for q in selector.questions_for(bonus_ids)]

    return jsonify({
        "success": True,
        "bonus_question_ids": bonus_ids,
        "questions": questions,
        "preliminary_totals": preliminary.totals
    })


@quiz_bp.route('/submit', methods=['POST'])
def submit_quiz():
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"error": "Invalid JSON in request body"}), 400

    if not _access_code_matches(data):
        return jsonify({"error": "Invalid access code"}), 403

    services = _services()
    ip_hash = hash_ip(get_ip_address(request))

    limiter = services['rate_limiter']
    decision = limiter.check(ip_hash or 'unknown')
    if not decision.allowed:
        logger.warning(f"Rate limit exceeded for client {(ip_hash or 'unknown')[:12]}")
        response = jsonify({"error": "Too many requests. Please try again later."})
        response.status_code = 429
        response.headers.update(decision.headers())
        response.headers['Retry-After'] = str(decision.retry_after(limiter.clock()))
        return response

    service = services['scoring_service']
    try:
        validated = validate_submission(data, service.questions, service.bonus_questions)
    except SubmissionValidationError as e:
        logger.info(f"Rejected submission: {len(e.details)} validation issue(s)")
        return jsonify({"error": "Invalid submission data", "details": e.details}), 400

    # Score server-side; client totals are never trusted
    result = service.score(validated['responses'])
    summary = service.summarize(result)

    submission = Submission.from_scoring(
        result,
        answers=validated['responses'],
        summary=summary,
        recommendations=recommendations_for(result.primary_role, result.secondary_role),
        name=validated['name'],
        team=validated['team'],
        bonus_questions_shown=validated['bonus_questions_shown'],
        user_agent=request.headers.get('User-Agent'),
        ip_hash=ip_hash,
    )

    try:
        services['repository'].create(submission)
    except PyMongoError:
        logger.exception("Failed to store submission")
        return jsonify({"error": "Failed to save submission"}), 500

    response = jsonify({
        "success": True,
        "submission_id": submission.submission_id,
        "submission": _public_view(submission)
    })
    response.headers.update(decision.headers())
    return response


@quiz_bp.route('/submissions/<submission_id>', methods=['GET'])
def get_submission(submission_id):
    if not is_valid_uuid(submission_id):
        return jsonify({"error": "Invalid submission ID format"}), 400

    try:
        submission = _services()['repository'].get(submission_id)
    except PyMongoError:
        logger.exception(f"Failed to load submission {submission_id}")
        return jsonify({"error": "Failed to load submission"}), 500

    if not submission:
        return jsonify({"error": "Submission not found"}), 404

    return jsonify({
        "success": True,
        "submission": _public_view(submission),
        "primary_playbook": get_role_playbook_by_string(submission.primary_role),
        "secondary_playbook": get_role_playbook(submission.secondary_role) if submission.secondary_role else None,
        "primary_software": get_role_software_by_string(submission.primary_role),
        "secondary_software": get_role_software(submission.secondary_role) if submission.secondary_role else None
    })


def _public_view(submission):
    data = submission.to_dict()
    for field in PRIVATE_FIELDS:
        data.pop(field, None)
    return data
