from questions.bonus_questions import BONUS_QUESTIONS
from services.bonus_service import BonusQuestionSelector, normalize_pair


def test_close_leaders_get_their_pair_questions():
    selector = BonusQuestionSelector(count=2, tie_delta=2)

    selected = selector.select({"BE": 10, "FE": 3, "QA": 9, "PM": 1}, seed="ada")

    assert selected == [103, 104]
    assert all(q["pair"] == "BE-QA" for q in selector.questions_for(selected))


def test_pair_lookup_normalizes_order():
    selector = BonusQuestionSelector()

    assert selector.leading_pair({"QA": 7, "PM": 8, "BE": 0, "FE": 0}) == "PM-QA"
    assert normalize_pair("QA-PM") == "PM-QA"


def test_clear_leader_gets_seeded_random_questions():
    selector = BonusQuestionSelector(count=2, tie_delta=2)
    totals = {"BE": 20, "FE": 3, "QA": 1, "PM": 0}

    first = selector.select(totals, seed="Grace Hopper")
    second = selector.select(totals, seed="Grace Hopper")

    assert first == second
    assert len(first) == 2
    assert len(set(first)) == 2
    assert set(first) <= {q["id"] for q in BONUS_QUESTIONS}


def test_selection_is_returned_in_bank_order():
    selector = BonusQuestionSelector(count=5, tie_delta=0)

    selected = selector.select({"BE": 20, "FE": 0, "QA": 0, "PM": 0}, seed=7)

    positions = [[q["id"] for q in BONUS_QUESTIONS].index(qid) for qid in selected]
    assert positions == sorted(positions)


def test_extra_slots_are_filled_beyond_the_pair():
    selector = BonusQuestionSelector(count=3, tie_delta=2)

    selected = selector.select({"BE": 5, "FE": 5, "QA": 0, "PM": 0}, seed="x")

    assert {101, 102} <= set(selected)
    assert len(selected) == 3


def test_zero_count_or_empty_bank_selects_nothing():
    assert BonusQuestionSelector(count=0).select({"BE": 1}) == []
    assert BonusQuestionSelector(bonus_questions=[]).select({"BE": 1, "FE": 1}) == []
