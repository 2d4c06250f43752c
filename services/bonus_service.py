# services/bonus_service.py
import random
from copy import deepcopy

from questions.bonus_questions import BONUS_QUESTIONS


def normalize_pair(pair):
    """'QA-PM', ('QA', 'PM') -> 'PM-QA'"""
    codes = pair.split('-') if isinstance(pair, str) else list(pair)
    return '-'.join(sorted(code.strip() for code in codes if code))


class BonusQuestionSelector:
    """
    Picks the bonus questions shown after the core bank.

    When the two leading roles are within ``tie_delta`` points, the questions
    written for that pair are used first; remaining slots are filled with a
    seeded random sample so a given respondent always sees the same set.
    """

    def __init__(self, bonus_questions=None, count=2, tie_delta=2):
        self.bonus_questions = deepcopy(bonus_questions if bonus_questions is not None else BONUS_QUESTIONS)
        self.count = count
        self.tie_delta = tie_delta

        # normalized pair -> list of questions, in bank order
        self.pair_map = {}
        for q in self.bonus_questions:
            pair_field = q.get('pair') or ''
            if not pair_field:
                continue
            self.pair_map.setdefault(normalize_pair(pair_field), []).append(q)

    def leading_pair(self, totals):
        """
        Return the normalized pair string of the top two roles when they are
        within tie_delta of each other, otherwise None.
        """
        # Sort roles by score desc, then by id to keep deterministic ordering.
        sorted_scores = sorted((totals or {}).items(), key=lambda x: (-x[1], x[0]))
        if len(sorted_scores) < 2:
            return None
        (first, s1), (second, s2) = sorted_scores[0], sorted_scores[1]
        if abs(s1 - s2) <= self.tie_delta:
            return normalize_pair((first, second))
        return None

    def select(self, totals, seed=None):
        """
        Choose bonus question ids for the given preliminary totals.
        Returns ids in bank order, without duplicates, at most ``count`` of them.
        """
        if self.count <= 0 or not self.bonus_questions:
            return []

        chosen = []
        pair = self.leading_pair(totals)
        if pair:
            for q in self.pair_map.get(pair, []):
                if len(chosen) >= self.count:
                    break
                chosen.append(q['id'])

        remaining = [q['id'] for q in self.bonus_questions if q['id'] not in chosen]
        slots = min(self.count - len(chosen), len(remaining))
        if slots > 0:
            rng = random.Random(seed)
            chosen.extend(rng.sample(remaining, slots))

        order = {q['id']: position for position, q in enumerate(self.bonus_questions)}
        return sorted(chosen, key=order.get)

    def questions_for(self, question_ids):
        wanted = set(question_ids or [])
        return [deepcopy(q) for q in self.bonus_questions if q['id'] in wanted]
