# services/submission_validator.py
from questions.core_questions import MAX_MULTI_SELECT, SINGLE_SELECT_TYPES

ALLOWED_FIELDS = ('responses', 'name', 'team', 'access_code', 'bonus_questions_shown')
MAX_TEXT_LENGTH = 255


class SubmissionValidationError(ValueError):
    """Raised when a submission payload fails validation; ``details`` lists each issue."""

    def __init__(self, details):
        self.details = details
        super().__init__(f"Invalid submission data ({len(details)} issue(s))")


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _issue(path, message):
    return {"path": path, "message": message}


def _check_response(question, response, path):
    """Return the list of issues for one response against its question."""
    option_count = len(question.get('options', []))

    if question.get('type') == 'multiple_choice':
        if not isinstance(response, list):
            return [_issue(path, "Expected a list of option indices")]
        if not 1 <= len(response) <= MAX_MULTI_SELECT:
            return [_issue(path, f"Select between 1 and {MAX_MULTI_SELECT} options")]
        issues = []
        for index in response:
            if not _is_int(index):
                issues.append(_issue(path, "Option indices must be integers"))
            elif not 0 <= index < option_count:
                issues.append(_issue(path, f"Option index {index} is out of range"))
        if not issues and len(set(response)) != len(response):
            issues.append(_issue(path, "Selected options must be distinct"))
        return issues

    if question.get('type') in SINGLE_SELECT_TYPES:
        if not _is_int(response):
            return [_issue(path, "Expected a single option index")]
        if not 0 <= response < option_count:
            return [_issue(path, f"Option index {response} is out of range")]
        return []

    return [_issue(path, "Question has an unknown type")]


def _clean_text(payload, field, issues):
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        issues.append(_issue(field, "Expected a string"))
        return None
    value = value.strip()
    if len(value) > MAX_TEXT_LENGTH:
        issues.append(_issue(field, f"Must be at most {MAX_TEXT_LENGTH} characters"))
        return None
    return value or None


def validate_submission(payload, core_questions, bonus_questions=()):
    """
    Validate a quiz submission payload.

    Every core question must be answered; any other answered id must be a
    bonus question. Returns a dict with int-keyed responses, cleaned name and
    team, and the bonus question ids that were shown.
    Raises SubmissionValidationError with every issue found.
    """
    if not isinstance(payload, dict):
        raise SubmissionValidationError([_issue("", "Request body must be a JSON object")])

    issues = []

    extra = sorted(key for key in payload if key not in ALLOWED_FIELDS)
    for key in extra:
        issues.append(_issue(key, "Unrecognized field"))

    core_lookup = {q['id']: q for q in core_questions}
    bonus_lookup = {q['id']: q for q in bonus_questions}

    raw_responses = payload.get('responses')
    responses = {}
    if not isinstance(raw_responses, dict):
        issues.append(_issue("responses", "Expected an object mapping question ids to answers"))
    else:
        for key, response in raw_responses.items():
            path = f"responses.{key}"
            try:
                question_id = int(key)
            except (ValueError, TypeError):
                issues.append(_issue(path, "Question id must be an integer"))
                continue

            question = core_lookup.get(question_id) or bonus_lookup.get(question_id)
            if question is None:
                issues.append(_issue(path, "Unknown question id"))
                continue

            problems = _check_response(question, response, path)
            if problems:
                issues.extend(problems)
            else:
                responses[question_id] = response

        missing = [qid for qid in core_lookup if str(qid) not in {str(k) for k in raw_responses}]
        if missing:
            issues.append(_issue(
                "responses",
                "All questions must be answered (missing: " + ", ".join(str(q) for q in missing) + ")",
            ))

    name = _clean_text(payload, 'name', issues)
    team = _clean_text(payload, 'team', issues)

    answered_bonus = sorted(qid for qid in responses if qid in bonus_lookup)
    shown = payload.get('bonus_questions_shown')
    if shown is None:
        bonus_shown = answered_bonus
    elif not isinstance(shown, list) or not all(_is_int(qid) for qid in shown):
        issues.append(_issue("bonus_questions_shown", "Expected a list of question ids"))
        bonus_shown = answered_bonus
    else:
        unknown = [qid for qid in shown if qid not in bonus_lookup]
        if unknown:
            issues.append(_issue("bonus_questions_shown",
                                 "Not bonus questions: " + ", ".join(str(q) for q in unknown)))
        bonus_shown = sorted(set(shown))

    if issues:
        raise SubmissionValidationError(issues)

    return {
        'responses': responses,
        'name': name,
        'team': team,
        'bonus_questions_shown': bonus_shown,
    }
