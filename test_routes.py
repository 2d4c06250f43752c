import uuid

import pytest

from app import create_app
from config import TestingConfig
from questions.role_software import ROLE_SOFTWARE
from services.rate_limiter import RateLimiter


def _submission_body(role_answers, **extra):
    body = {"responses": {str(k): v for k, v in role_answers("BE").items()}, "name": "Ada", "team": "Core"}
    body.update(extra)
    return body


def test_index_reports_status(client):
    assert client.get("/").get_json() == {"status": "ok", "service": "role-fit-quiz"}


def test_questions_are_sent_without_scoring(client):
    data = client.get("/api/quiz/questions").get_json()

    assert data["success"] is True
    assert len(data["questions"]) == 10
    assert all("scoring" not in q and "option_metadata" not in q for q in data["questions"])
    assert [r["id"] for r in data["roles"]] == ["BE", "FE", "QA", "PM"]


def test_bonus_questions_for_partial_answers(client):
    response = client.post("/api/quiz/bonus-questions", json={"responses": {"1": 1, "4": 2}, "name": "Ada"})

    data = response.get_json()
    assert response.status_code == 200
    assert data["preliminary_totals"] == {"BE": 2, "FE": 0, "QA": 2, "PM": 0}
    assert data["bonus_question_ids"] == [103, 104]
    assert all("scoring" not in q for q in data["questions"])


def test_bonus_questions_need_responses(client):
    assert client.post("/api/quiz/bonus-questions", json={"name": "Ada"}).status_code == 400


def test_submit_scores_and_stores(client, collection, role_answers):
    response = client.post(
        "/api/quiz/submit",
        json=_submission_body(role_answers),
        headers={"X-Forwarded-For": "203.0.113.5, 10.0.0.1", "User-Agent": "pytest-agent"},
    )

    data = response.get_json()
    assert response.status_code == 200
    assert data["success"] is True
    assert data["submission"]["primary_role"] == "BE"
    assert data["submission"]["confidence_band"] == "Strong"
    assert "ip_hash" not in data["submission"]
    assert response.headers["X-RateLimit-Limit"] == "5"
    assert response.headers["X-RateLimit-Remaining"] == "4"

    stored = collection.documents[0]
    assert stored["submission_id"] == data["submission_id"]
    assert stored["user_agent"] == "pytest-agent"
    assert len(stored["ip_hash"]) == 64
    assert stored["team"] == "Core"


def test_submit_ignores_client_supplied_totals(client, role_answers):
    response = client.post("/api/quiz/submit", json=_submission_body(role_answers, totals={"PM": 99}))

    assert response.status_code == 400
    assert any(d["path"] == "totals" for d in response.get_json()["details"])


def test_submit_rejects_invalid_json(client):
    response = client.post("/api/quiz/submit", data="{not json", content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid JSON in request body"


def test_submit_rejects_incomplete_answers(client, collection):
    response = client.post("/api/quiz/submit", json={"responses": {"1": 0}})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid submission data"
    assert collection.documents == []


def test_submit_is_rate_limited(repository, role_answers):
    class Config(TestingConfig):
        RATE_LIMIT_MAX_REQUESTS = 2

    client = create_app(Config, repository=repository).test_client()
    headers = {"X-Real-IP": "198.51.100.7"}

    statuses = [
        client.post("/api/quiz/submit", json=_submission_body(role_answers), headers=headers).status_code
        for _ in range(3)
    ]

    assert statuses == [200, 200, 429]
    blocked = client.post("/api/quiz/submit", json=_submission_body(role_answers), headers=headers)
    assert int(blocked.headers["Retry-After"]) >= 1
    assert blocked.headers["X-RateLimit-Remaining"] == "0"


def test_injected_rate_limiter_is_used(repository, role_answers):
    limiter = RateLimiter(max_requests=1, window_seconds=60)
    client = create_app(TestingConfig, repository=repository, rate_limiter=limiter).test_client()

    client.post("/api/quiz/submit", json=_submission_body(role_answers))
    response = client.post("/api/quiz/submit", json=_submission_body(role_answers))

    assert response.status_code == 429


def test_access_code_is_enforced(repository, role_answers):
    class Config(TestingConfig):
        QUIZ_ACCESS_CODE = "open-sesame"

    client = create_app(Config, repository=repository).test_client()

    denied = client.post("/api/quiz/submit", json=_submission_body(role_answers, access_code="wrong"))
    allowed = client.post("/api/quiz/submit", json=_submission_body(role_answers, access_code="open-sesame"))

    assert denied.status_code == 403
    assert allowed.status_code == 200


def test_get_submission_by_id(client, role_answers):
    submission_id = client.post("/api/quiz/submit", json=_submission_body(role_answers)).get_json()["submission_id"]

    data = client.get(f"/api/quiz/submissions/{submission_id}").get_json()

    assert data["submission"]["submission_id"] == submission_id
    assert data["primary_playbook"]["role_label"] == "Backend-Focused Analyst"
    assert data["primary_software"] == ROLE_SOFTWARE["BE"]
    assert data["secondary_software"] == ROLE_SOFTWARE[data["submission"]["secondary_role"]]
    assert "user_agent" not in data["submission"]


@pytest.mark.parametrize("submission_id,status", [("not-a-uuid", 400), (str(uuid.uuid4()), 404)])
def test_get_submission_errors(client, submission_id, status):
    assert client.get(f"/api/quiz/submissions/{submission_id}").status_code == status


def test_admin_login_rules(client):
    assert client.post("/api/admin/login", json={"password": "nope"}).status_code == 401
    assert client.get("/api/admin/submissions").status_code == 401
    assert client.post("/api/admin/login", json={"password": TestingConfig.ADMIN_PASSWORD}).status_code == 200
    assert client.get("/api/admin/submissions").status_code == 200


def test_admin_login_without_configured_password(repository):
    class Config(TestingConfig):
        ADMIN_PASSWORD = None

    client = create_app(Config, repository=repository).test_client()

    assert client.post("/api/admin/login", json={"password": "anything"}).status_code == 500


def test_admin_logout_clears_session(admin_client):
    admin_client.post("/api/admin/logout")

    assert admin_client.get("/api/admin/dashboard").status_code == 401


def test_admin_listing_and_dashboard(admin_client, role_answers):
    admin_client.post("/api/quiz/submit", json=_submission_body(role_answers))
    admin_client.post("/api/quiz/submit", json=_submission_body(role_answers, team="Ops"))

    rows = admin_client.get("/api/admin/submissions").get_json()["submissions"]
    assert len(rows) == 2
    assert all(row["score_spread"] == 17 for row in rows)

    core_only = admin_client.get("/api/admin/submissions?team=Core").get_json()["submissions"]
    assert [row["team"] for row in core_only] == ["Core"]

    dashboard = admin_client.get("/api/admin/dashboard").get_json()["dashboard"]
    assert dashboard["total_submissions"] == 2
    assert dashboard["primary_counts"] == {"BE": 2}
    assert dashboard["confidence_band_counts"]["Strong"] == 2
    assert dashboard["leadership_translation"].startswith("The team shows limited depth in Backend Engineer")


def test_admin_clear_data(admin_client, collection, role_answers):
    admin_client.post("/api/quiz/submit", json=_submission_body(role_answers))

    data = admin_client.delete("/api/admin/clear-data").get_json()

    assert data["deleted_count"] == 1
    assert collection.documents == []


def test_create_app_requires_database_without_repository():
    class Config(TestingConfig):
        MONGO_URI = None

    with pytest.raises(ValueError):
        create_app(Config)
