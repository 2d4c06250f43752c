# services/scoring_service.py
from copy import deepcopy

from questions.bonus_questions import BONUS_QUESTIONS
from questions.core_questions import MAX_MULTI_SELECT, QUESTIONS, QUESTION_TYPES, SINGLE_SELECT_TYPES
from questions.roles import ROLE_ORDER, ROLES
from services.narrative_service import generate_narrative

STRONG_SIGNAL_THRESHOLD = 2
MAX_EVIDENCE_HIGHLIGHTS = 5
CONFIDENCE_STRONG_MIN = 6
CONFIDENCE_CLEAR_MIN = 3

CONFIDENCE_BANDS = ("Strong", "Clear", "Split", "Hybrid")


class ScoringResult:
    """Outcome of scoring one response set."""

    def __init__(self, totals, strong_signal_counts, ranked, primary_role, secondary_role,
                 tie_detected, skill_profile, evidence_highlights, narrative, contributions=None):
        self.totals = totals
        self.strong_signal_counts = strong_signal_counts
        self.ranked = ranked
        self.primary_role = primary_role
        self.secondary_role = secondary_role
        self.tie_detected = tie_detected
        self.skill_profile = skill_profile
        self.evidence_highlights = evidence_highlights
        self.narrative = narrative
        self.contributions = contributions or []

    def to_dict(self):
        return {
            'totals': dict(self.totals),
            'strong_signal_counts': dict(self.strong_signal_counts),
            'ranked': [dict(entry) for entry in self.ranked],
            'primary_role': self.primary_role,
            'secondary_role': self.secondary_role,
            'tie_detected': self.tie_detected,
            'skill_profile': {
                'tags': list(self.skill_profile['tags']),
                'tag_frequency': dict(self.skill_profile['tag_frequency']),
            },
            'evidence_highlights': [dict(h) for h in self.evidence_highlights],
            'narrative': self.narrative,
        }


# -------------------------
# Pure scoring
# -------------------------
def score_responses(responses, question_bank=None,
                    strong_signal_threshold=STRONG_SIGNAL_THRESHOLD,
                    multi_select_strong_signals=True,
                    max_highlights=MAX_EVIDENCE_HIGHLIGHTS):
    """
    Score a (possibly partial) response set against a question bank.

    - responses: dict mapping question id (int, or a numeric string) -> option index
      for single-select questions, or a list of option indices for multi-select
    - question_bank: ordered list of question dicts; defaults to core + bonus banks
    Unanswered questions and malformed or out-of-range selections are skipped.
    Returns: ScoringResult
    """
    if question_bank is None:
        question_bank = QUESTIONS + BONUS_QUESTIONS
    answers = _normalize_response_keys(responses)

    totals = {role: 0 for role in ROLE_ORDER}
    strong_signal_counts = {role: 0 for role in ROLE_ORDER}
    tag_frequency = {}
    evidence = []
    contributions = []

    for question in question_bank:
        response = answers.get(question.get('id'))
        if response is None:
            continue

        qtype = question.get('type')
        if qtype in SINGLE_SELECT_TYPES:
            option = _option_at(question, response)
            if option is None:
                continue
            best = _apply_option(question, option, totals, strong_signal_counts, tag_frequency,
                                 evidence, strong_signal_threshold, count_strong=True)
            if best[1] > 0:
                contributions.append({
                    'question_id': question['id'],
                    'role_id': best[0],
                    'score': best[1],
                    'option_text': option['text'],
                })

        elif qtype == 'multiple_choice':
            if not isinstance(response, (list, tuple)):
                continue
            seen = set()
            selected_texts = []
            question_best = None
            for index in response:
                option = _option_at(question, index)
                if option is None or option['index'] in seen:
                    continue
                seen.add(option['index'])
                selected_texts.append(option['text'])
                best = _apply_option(question, option, totals, strong_signal_counts, tag_frequency,
                                     evidence, strong_signal_threshold,
                                     count_strong=multi_select_strong_signals)
                # First selection wins ties
                if question_best is None or best[1] > question_best[1]:
                    question_best = best
            if question_best is not None and question_best[1] > 0:
                contributions.append({
                    'question_id': question['id'],
                    'role_id': question_best[0],
                    'score': question_best[1],
                    'option_text': ", ".join(selected_texts),
                })

    ranked = rank_roles(totals, strong_signal_counts)
    primary_role, secondary_role, tie_detected = resolve_primary_role(ranked, strong_signal_counts)

    evidence_highlights = sorted(evidence, key=lambda h: -h['score'])[:max_highlights]

    tags = sorted(tag_frequency)
    skill_profile = {
        'tags': tags,
        'tag_frequency': {tag: tag_frequency[tag] for tag in tags},
    }

    question_lookup = {q.get('id'): q for q in question_bank}
    narrative = generate_narrative(totals, primary_role, secondary_role, tie_detected,
                                   contributions, question_lookup)

    return ScoringResult(
        totals=totals,
        strong_signal_counts=strong_signal_counts,
        ranked=ranked,
        primary_role=primary_role,
        secondary_role=secondary_role,
        tie_detected=tie_detected,
        skill_profile=skill_profile,
        evidence_highlights=evidence_highlights,
        narrative=narrative,
        contributions=contributions,
    )


def _normalize_response_keys(responses):
    """Keep int ids and digit-only strings; anything else (floats, bools) is dropped."""
    normalized = {}
    for key, value in (responses or {}).items():
        if isinstance(key, int) and not isinstance(key, bool):
            normalized[key] = value
        elif isinstance(key, str) and key.strip().isdecimal():
            normalized[int(key)] = value
    return normalized


def _option_at(question, index):
    """Return the selected option if the index is valid for all parallel arrays."""
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    options = question.get('options') or []
    scoring = question.get('scoring') or []
    metadata = question.get('option_metadata') or []
    if index < 0 or index >= min(len(options), len(scoring), len(metadata)):
        return None
    return {
        'index': index,
        'text': options[index],
        'scoring': scoring[index] or {},
        'metadata': metadata[index] or {},
    }


def _apply_option(question, option, totals, strong_signal_counts, tag_frequency,
                  evidence, threshold, count_strong=True):
    """Add one option's scores and tags. Returns (top_role, top_value) for the option."""
    scoring = option['scoring']
    values = [scoring.get(role, 0) for role in ROLE_ORDER]
    for role, value in zip(ROLE_ORDER, values):
        totals[role] += value

    metadata = option['metadata']
    signals = list(metadata.get('signals') or [])
    for signal in signals:
        tag_frequency[signal] = tag_frequency.get(signal, 0) + 1

    max_value = max(values)
    top_role = ROLE_ORDER[values.index(max_value)]

    if count_strong and max_value >= threshold:
        for role, value in zip(ROLE_ORDER, values):
            if value >= threshold:
                strong_signal_counts[role] += 1
        evidence.append({
            'question_id': question['id'],
            'question_prompt': question.get('prompt', ''),
            'option_text': option['text'],
            'evidence': metadata.get('evidence', ''),
            'signals': signals,
            'score': max_value,
        })

    return top_role, max_value


def rank_roles(totals, strong_signal_counts):
    """
    Order roles by total, then strong-signal count, then role id.
    Roles equal on both total and strong-signal count share a rank (1, 1, 3).
    """
    ordered = sorted(totals, key=lambda role: (-totals[role], -strong_signal_counts.get(role, 0), role))

    ranked = []
    for index, role in enumerate(ordered):
        rank = index + 1
        if index > 0:
            previous = ordered[index - 1]
            if (totals[previous] == totals[role]
                    and strong_signal_counts.get(previous, 0) == strong_signal_counts.get(role, 0)):
                rank = ranked[-1]['rank']
        ranked.append({'role_id': role, 'score': totals[role], 'rank': rank})
    return ranked


def resolve_primary_role(ranked, strong_signal_counts):
    """Returns (primary_role, secondary_role, tie_detected)."""
    if not ranked:
        return None, None, False

    top = ranked[0]
    top_strong = strong_signal_counts.get(top['role_id'], 0)
    tied = [
        entry for entry in ranked
        if entry['rank'] == 1
        and entry['score'] == top['score']
        and strong_signal_counts.get(entry['role_id'], 0) == top_strong
    ]

    if len(tied) == 2:
        first, second = tied[0]['role_id'], tied[1]['role_id']
        return f"{first} + {second}", second, True
    if len(tied) > 2:
        first, second = sorted(entry['role_id'] for entry in tied)[:2]
        return f"{first} + {second}", second, True

    secondary = ranked[1]['role_id'] if len(ranked) > 1 else None
    return top['role_id'], secondary, False


# -------------------------
# Post-processing
# -------------------------
def dominance_score(ranked):
    """Gap between the first and second ranked totals."""
    if len(ranked) < 2:
        return 0
    return ranked[0]['score'] - ranked[1]['score']


def confidence_band(dominance, tie_detected, strong_min=CONFIDENCE_STRONG_MIN,
                    clear_min=CONFIDENCE_CLEAR_MIN):
    if tie_detected:
        return "Hybrid"
    if dominance >= strong_min:
        return "Strong"
    if dominance >= clear_min:
        return "Clear"
    return "Split"


def validate_question_bank(questions, roles=ROLE_ORDER):
    """Return a list of problems found in a question bank; empty when it is sound."""
    problems = []
    seen_ids = set()
    for position, question in enumerate(questions):
        qid = question.get('id')
        label = f"question {qid if qid is not None else '#' + str(position)}"

        if isinstance(qid, bool) or not isinstance(qid, int):
            problems.append(f"{label}: id must be an integer")
        elif qid in seen_ids:
            problems.append(f"{label}: duplicate id")
        else:
            seen_ids.add(qid)

        if question.get('type') not in QUESTION_TYPES:
            problems.append(f"{label}: unknown type {question.get('type')!r}")

        options = question.get('options') or []
        scoring = question.get('scoring') or []
        metadata = question.get('option_metadata') or []
        if not options:
            problems.append(f"{label}: has no options")
        if not (len(options) == len(scoring) == len(metadata)):
            problems.append(
                f"{label}: options/scoring/option_metadata lengths differ "
                f"({len(options)}/{len(scoring)}/{len(metadata)})"
            )

        for index, vector in enumerate(scoring):
            missing = [role for role in roles if role not in (vector or {})]
            if missing:
                problems.append(f"{label}: option {index} scoring is missing {', '.join(missing)}")
    return problems


class ScoringService:
    """
    Holds the question banks and the configured scoring parameters.
    """

    def __init__(self, questions=None, bonus_questions=None,
                 strong_signal_threshold=STRONG_SIGNAL_THRESHOLD,
                 multi_select_strong_signals=True,
                 max_highlights=MAX_EVIDENCE_HIGHLIGHTS,
                 confidence_strong_min=CONFIDENCE_STRONG_MIN,
                 confidence_clear_min=CONFIDENCE_CLEAR_MIN):
        # Load static question sets once
        self.questions = deepcopy(questions if questions is not None else QUESTIONS)
        self.bonus_questions = deepcopy(bonus_questions if bonus_questions is not None else BONUS_QUESTIONS)
        self.strong_signal_threshold = strong_signal_threshold
        self.multi_select_strong_signals = multi_select_strong_signals
        self.max_highlights = max_highlights
        self.confidence_strong_min = confidence_strong_min
        self.confidence_clear_min = confidence_clear_min

    @classmethod
    def from_config(cls, config):
        """Build from a Flask config mapping."""
        return cls(
            strong_signal_threshold=config.get('STRONG_SIGNAL_THRESHOLD', STRONG_SIGNAL_THRESHOLD),
            multi_select_strong_signals=config.get('MULTI_SELECT_STRONG_SIGNALS', True),
            max_highlights=config.get('MAX_EVIDENCE_HIGHLIGHTS', MAX_EVIDENCE_HIGHLIGHTS),
            confidence_strong_min=config.get('CONFIDENCE_STRONG_MIN', CONFIDENCE_STRONG_MIN),
            confidence_clear_min=config.get('CONFIDENCE_CLEAR_MIN', CONFIDENCE_CLEAR_MIN),
        )

    @property
    def question_bank(self):
        return self.questions + self.bonus_questions

    def get_questions(self):
        """Return core questions (not yet safe to send to client)."""
        return deepcopy(self.questions)

    def check_question_bank(self):
        return validate_question_bank(self.question_bank)

    def score(self, responses):
        return score_responses(
            responses,
            self.question_bank,
            strong_signal_threshold=self.strong_signal_threshold,
            multi_select_strong_signals=self.multi_select_strong_signals,
            max_highlights=self.max_highlights,
        )

    def summarize(self, result):
        """Dominance score and confidence band for a ScoringResult."""
        dominance = dominance_score(result.ranked)
        band = confidence_band(dominance, result.tie_detected,
                               strong_min=self.confidence_strong_min,
                               clear_min=self.confidence_clear_min)
        return {'dominance_score': dominance, 'confidence_band': band}

    # -------------------------
    # Utilities for transport
    # -------------------------
    def prepare_question_for_client(self, question):
        """
        Remove scoring and metadata before sending a question to the client.
        """
        q = {
            'id': question.get('id'),
            'type': question.get('type'),
            'prompt': question.get('prompt'),
            'options': list(question.get('options', [])),
        }
        if question.get('type') == 'multiple_choice':
            q['max_selections'] = MAX_MULTI_SELECT
        return q

    def get_roles(self):
        return [dict(ROLES[role]) for role in ROLE_ORDER]
