from copy import deepcopy
from types import SimpleNamespace

import pytest

from app import create_app
from config import TestingConfig
from models.submission import SubmissionRepository
from questions.core_questions import QUESTIONS, SINGLE_SELECT_TYPES
from questions.roles import ROLE_ORDER


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    def sort(self, key, direction=1):
        self._documents = sorted(self._documents, key=lambda d: d.get(key) or "", reverse=direction < 0)
        return self

    def __iter__(self):
        return iter(self._documents)


class FakeCollection:
    """In-memory stand-in for the slice of a pymongo collection the repository uses."""

    def __init__(self):
        self.documents = []
        self.indexes = []

    @staticmethod
    def _matches(document, query):
        return all(document.get(key) == value for key, value in (query or {}).items())

    @staticmethod
    def _project(document, projection):
        result = deepcopy(document)
        if projection and projection.get("_id") == 0:
            result.pop("_id", None)
        return result

    def insert_one(self, document):
        stored = deepcopy(document)
        stored.setdefault("_id", len(self.documents) + 1)
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find_one(self, query=None, projection=None):
        for document in self.documents:
            if self._matches(document, query):
                return self._project(document, projection)
        return None

    def find(self, query=None, projection=None):
        return FakeCursor([self._project(d, projection) for d in self.documents if self._matches(d, query)])

    def update_one(self, query, update):
        for document in self.documents:
            if self._matches(document, query):
                document.update(deepcopy(update.get("$set", {})))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    def delete_many(self, query):
        kept = [d for d in self.documents if not self._matches(d, query)]
        deleted = len(self.documents) - len(kept)
        self.documents = kept
        return SimpleNamespace(deleted_count=deleted)

    def count_documents(self, query):
        return sum(1 for d in self.documents if self._matches(d, query))

    def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))
        return str(keys)


def make_question(qid, qtype="forced_choice", scoring=None, signals=None, prompt=None):
    """Build a question dict; one option per scoring vector."""
    scoring = scoring or [{"BE": 2, "FE": 0, "QA": 0, "PM": 0}]
    full_scoring = [{role: vector.get(role, 0) for role in ROLE_ORDER} for vector in scoring]
    return {
        "id": qid,
        "type": qtype,
        "prompt": prompt or f"Question {qid}",
        "options": [f"Q{qid} option {i}" for i in range(len(scoring))],
        "scoring": full_scoring,
        "option_metadata": [
            {
                "signals": list(signals[i]) if signals else [f"tag-{qid}-{i}"],
                "evidence": f"Evidence for question {qid} option {i}.",
            }
            for i in range(len(scoring))
        ],
    }


def answers_favoring(role, questions=QUESTIONS):
    """
    Pick, for each question, the option giving ``role`` its highest score with
    nothing for any other role; multi-select questions get a single such option.
    """
    answers = {}
    for question in questions:
        best_index, best_value = None, 0
        for index, vector in enumerate(question["scoring"]):
            others = [v for r, v in vector.items() if r != role]
            if vector.get(role, 0) > best_value and all(v == 0 for v in others):
                best_index, best_value = index, vector[role]
        if best_index is None:
            continue
        if question["type"] in SINGLE_SELECT_TYPES:
            answers[question["id"]] = best_index
        else:
            answers[question["id"]] = [best_index]
    return answers


@pytest.fixture
def question_factory():
    return make_question


@pytest.fixture
def role_answers():
    return answers_favoring


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return SubmissionRepository(collection)


@pytest.fixture
def app(repository):
    return create_app(TestingConfig, repository=repository)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    response = client.post("/api/admin/login", json={"password": TestingConfig.ADMIN_PASSWORD})
    assert response.status_code == 200
    return client
