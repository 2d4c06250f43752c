from questions.bonus_questions import BONUS_QUESTIONS
from questions.core_questions import QUESTIONS
from questions.role_playbooks import ROLE_PLAYBOOKS, get_role_playbook_by_string, recommendations_for
from questions.role_software import ROLE_SOFTWARE, get_role_software, get_role_software_by_string
from questions.roles import ROLE_ORDER, ROLES, split_role_string
from services.bonus_service import normalize_pair
from services.scoring_service import validate_question_bank


def test_shipped_banks_are_valid_and_ids_unique():
    assert validate_question_bank(QUESTIONS + BONUS_QUESTIONS) == []


def test_core_bank_shape():
    types = [q["type"] for q in QUESTIONS]
    assert len(QUESTIONS) == 10
    assert types.count("forced_choice") == 4
    assert types.count("multiple_choice") == 3
    assert types.count("likert") == 3


def test_bonus_ids_are_above_core_range_and_cover_every_pair():
    assert all(q["id"] >= 100 for q in BONUS_QUESTIONS)
    pairs = {normalize_pair(q["pair"]) for q in BONUS_QUESTIONS}
    expected = {normalize_pair((a, b)) for i, a in enumerate(ROLE_ORDER) for b in ROLE_ORDER[i + 1:]}
    assert pairs == expected


def test_canonical_scores_are_non_negative():
    for question in QUESTIONS + BONUS_QUESTIONS:
        for vector in question["scoring"]:
            assert all(value >= 0 for value in vector.values())
            if question["type"] == "multiple_choice":
                assert max(vector.values()) == 1


def test_validator_reports_broken_questions(question_factory):
    broken = question_factory(1, "forced_choice", [{"BE": 2}, {"FE": 2}])
    broken["options"].append("extra")
    duplicate = question_factory(1, "likert")
    unknown = question_factory(2, "ranking")
    missing_role = question_factory(3)
    del missing_role["scoring"][0]["PM"]

    problems = validate_question_bank([broken, duplicate, unknown, missing_role])

    assert any("lengths differ" in p for p in problems)
    assert any("duplicate id" in p for p in problems)
    assert any("unknown type" in p for p in problems)
    assert any("missing PM" in p for p in problems)


def test_playbook_lookup_by_compound_string():
    assert get_role_playbook_by_string("QA + PM") is ROLE_PLAYBOOKS["QA"]
    assert get_role_playbook_by_string("XX") is None
    assert get_role_playbook_by_string("") is None


def test_software_lookup_uses_first_role_of_compound():
    assert set(ROLE_SOFTWARE) == set(ROLE_ORDER)
    assert all(entry["learn_first"] and entry["next_steps"] for entry in ROLE_SOFTWARE.values())
    assert get_role_software_by_string("FE + QA") is ROLE_SOFTWARE["FE"]
    assert get_role_software_by_string("PM") is get_role_software("PM")
    assert get_role_software_by_string("XX") is None
    assert get_role_software_by_string(None) is None


def test_recommendations_come_from_best_used_for():
    primary, secondary = recommendations_for("BE + FE", "FE")
    assert primary == ROLE_PLAYBOOKS["BE"]["best_used_for"]
    assert secondary == ROLE_PLAYBOOKS["FE"]["best_used_for"]
    assert recommendations_for("PM", None)[1] == []


def test_roles_and_split():
    assert set(ROLES) == set(ROLE_ORDER)
    assert split_role_string("BE + FE") == ["BE", "FE"]
    assert split_role_string(None) == []
