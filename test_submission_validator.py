import pytest

from questions.bonus_questions import BONUS_QUESTIONS
from questions.core_questions import QUESTIONS
from services.submission_validator import SubmissionValidationError, validate_submission


def _payload(role_answers, **extra):
    payload = {"responses": {str(k): v for k, v in role_answers("BE").items()}}
    payload.update(extra)
    return payload


def _issues(payload):
    with pytest.raises(SubmissionValidationError) as excinfo:
        validate_submission(payload, QUESTIONS, BONUS_QUESTIONS)
    return excinfo.value.details


def test_complete_submission_is_accepted(role_answers):
    validated = validate_submission(
        _payload(role_answers, name="  Ada  ", team="Platform", access_code="x"),
        QUESTIONS, BONUS_QUESTIONS,
    )

    assert set(validated["responses"]) == {q["id"] for q in QUESTIONS}
    assert validated["name"] == "Ada"
    assert validated["team"] == "Platform"
    assert validated["bonus_questions_shown"] == []


def test_missing_core_question_is_rejected(role_answers):
    payload = _payload(role_answers)
    del payload["responses"]["5"]

    issues = _issues(payload)

    assert any("missing: 5" in issue["message"] for issue in issues)


@pytest.mark.parametrize("qid,answer", [
    ("1", 4),          # out of range
    ("1", [0]),        # list for single select
    ("1", True),       # bool
    ("2", 0),          # int for multi select
    ("2", []),         # empty selection
    ("2", [0, 1, 2]),  # more than two
    ("2", [1, 1]),     # duplicates
    ("2", [0, 6]),     # out of range
])
def test_bad_answer_shapes_are_rejected(role_answers, qid, answer):
    payload = _payload(role_answers)
    payload["responses"][qid] = answer

    issues = _issues(payload)

    assert any(issue["path"] == f"responses.{qid}" for issue in issues)


def test_extra_fields_and_unknown_questions_are_rejected(role_answers):
    payload = _payload(role_answers, totals={"BE": 100})
    payload["responses"]["55"] = 0

    paths = {issue["path"] for issue in _issues(payload)}

    assert "totals" in paths
    assert "responses.55" in paths


def test_long_or_non_string_names_are_rejected(role_answers):
    paths = {issue["path"] for issue in _issues(_payload(role_answers, name="x" * 256, team=5))}

    assert paths == {"name", "team"}


def test_blank_name_becomes_none(role_answers):
    validated = validate_submission(_payload(role_answers, name="   ", team=None), QUESTIONS, BONUS_QUESTIONS)

    assert validated["name"] is None
    assert validated["team"] is None


def test_bonus_answers_are_accepted_and_recorded(role_answers):
    payload = _payload(role_answers)
    payload["responses"]["101"] = 1
    payload["responses"]["102"] = 4

    validated = validate_submission(payload, QUESTIONS, BONUS_QUESTIONS)

    assert validated["responses"][101] == 1
    assert validated["bonus_questions_shown"] == [101, 102]


def test_bonus_questions_shown_must_be_bonus_ids(role_answers):
    issues = _issues(_payload(role_answers, bonus_questions_shown=[101, 3]))

    assert issues[0]["path"] == "bonus_questions_shown"


def test_non_object_body_is_rejected():
    with pytest.raises(SubmissionValidationError):
        validate_submission(["not", "an", "object"], QUESTIONS, BONUS_QUESTIONS)
