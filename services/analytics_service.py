# services/analytics_service.py
"""
Aggregates for the admin dashboard.

All functions work on stored submission dicts (snake_case keys, as written by
SubmissionRepository) and never touch the database themselves.
"""
from questions.roles import ROLE_ORDER, ROLES, split_role_string
from services.scoring_service import CONFIDENCE_BANDS

UNASSIGNED_TEAM = "Unassigned"
MAX_INSIGHTS = 4
LOW_CONFIDENCE_RATIO = 0.3


def _role_label(role_id):
    role = ROLES.get(role_id)
    return role['label'] if role else role_id


def format_role_label(role_string):
    """'BE + FE' -> 'Backend Engineer + Frontend Engineer'"""
    return " + ".join(_role_label(role) for role in split_role_string(role_string))


def filter_by_team(submissions, team=None):
    if not team:
        return list(submissions)
    if team == UNASSIGNED_TEAM:
        return [s for s in submissions if not s.get('team')]
    return [s for s in submissions if s.get('team') == team]


def score_spread(totals):
    values = list((totals or {}).values())
    if not values:
        return 0
    return max(values) - min(values)


def top_skill_tags(submission, limit=3):
    profile = submission.get('skill_profile') or {}
    tags = profile.get('tags') or []
    frequency = profile.get('tag_frequency') or {}
    return sorted(tags, key=lambda tag: (-frequency.get(tag, 0), tag))[:limit]


def role_counts(submissions):
    """Primary counts (compound roles count for both), secondary counts and band counts."""
    primary_counts = {}
    secondary_counts = {}
    band_counts = {band: 0 for band in CONFIDENCE_BANDS}

    for sub in submissions:
        for role in split_role_string(sub.get('primary_role')):
            primary_counts[role] = primary_counts.get(role, 0) + 1

        secondary = sub.get('secondary_role')
        if secondary:
            secondary_counts[secondary] = secondary_counts.get(secondary, 0) + 1

        band = sub.get('confidence_band')
        if band:
            band_counts[band] = band_counts.get(band, 0) + 1

    return {
        'primary_counts': primary_counts,
        'secondary_counts': secondary_counts,
        'confidence_band_counts': band_counts,
    }


def risk_insights(submissions, counts=None):
    """Coverage and concentration warnings, most important first."""
    total_people = len(submissions)
    if total_people == 0:
        return []
    counts = counts or role_counts(submissions)
    primary_counts = counts['primary_counts']
    secondary_counts = counts['secondary_counts']
    band_counts = counts['confidence_band_counts']

    insights = []

    qa_count = primary_counts.get('QA', 0)
    if 0 < qa_count <= 2:
        insights.append(
            f"QA-style thinking is concentrated in {qa_count} individual{'' if qa_count == 1 else 's'} "
            f"→ elevated release risk"
        )

    be_with_pm_secondary = [
        sub for sub in submissions
        if 'BE' in split_role_string(sub.get('primary_role')) and sub.get('secondary_role') == 'PM'
    ]
    if be_with_pm_secondary:
        insights.append(
            "Most Backend-aligned individuals also show secondary PM traits "
            "→ good for ownership, but watch burnout"
        )

    if primary_counts.get('FE', 0) == 0 and secondary_counts.get('FE', 0) > 0:
        insights.append("FE alignment is present but often secondary → usability may be underrepresented")

    missing = [role for role in ROLE_ORDER if primary_counts.get(role, 0) == 0]
    if missing:
        labels = ", ".join(_role_label(role) for role in missing)
        insights.append(f"No primary {labels} alignment detected → consider coverage gaps")

    low_confidence = band_counts.get('Split', 0) + band_counts.get('Hybrid', 0)
    if low_confidence > total_people * LOW_CONFIDENCE_RATIO:
        insights.append(
            f"{low_confidence} individuals show Split/Hybrid confidence "
            f"→ consider additional context for role assignments"
        )

    return insights[:MAX_INSIGHTS]


def leadership_translation(submissions, counts=None):
    """One-sentence summary of depth, coverage and redundancy across the team."""
    total_people = len(submissions)
    if total_people == 0:
        return ""
    counts = counts or role_counts(submissions)

    ordered = sorted(counts['primary_counts'].items(), key=lambda item: -item[1])
    top_role, top_count = ordered[0] if ordered else ("", 0)
    second_role, second_count = ordered[1] if len(ordered) > 1 else ("", 0)

    top_label = _role_label(top_role) if top_role else ""
    second_label = _role_label(second_role) if second_role else "secondary roles"

    if top_count <= 2:
        depth = "limited"
    elif top_count <= total_people * 0.4:
        depth = "moderate"
    else:
        depth = "strong"

    if second_count == 0:
        coverage = "limited"
    elif second_count >= total_people * 0.3:
        coverage = "strong"
    else:
        coverage = "moderate"

    if top_count == 1 and second_count == 0:
        redundancy = "limited"
    elif top_count <= 2 and second_count <= 1:
        redundancy = "moderate"
    else:
        redundancy = "good"

    suffix = " → consider cross-training" if redundancy == "limited" else ""
    return (
        f"The team shows {depth} depth in {top_label}, {coverage} coverage in {second_label}, "
        f"and {redundancy} redundancy{suffix}."
    )


def team_composition(submissions):
    teams = {}
    for sub in submissions:
        team = sub.get('team') or UNASSIGNED_TEAM
        entry = teams.setdefault(team, {'members': [], 'role_breakdown': {}, 'total_members': 0})
        entry['members'].append({
            'submission_id': sub.get('submission_id'),
            'name': sub.get('name'),
            'primary_role': sub.get('primary_role'),
            'secondary_role': sub.get('secondary_role'),
            'confidence_band': sub.get('confidence_band'),
        })
        entry['total_members'] += 1
        for role in split_role_string(sub.get('primary_role')):
            entry['role_breakdown'][role] = entry['role_breakdown'].get(role, 0) + 1
    return teams


def submission_row(sub):
    """Flattened per-person row used by the admin listing."""
    row = dict(sub)
    row['score_spread'] = score_spread(sub.get('totals'))
    row['top_skill_tags'] = top_skill_tags(sub)
    row['primary_role_label'] = format_role_label(sub.get('primary_role'))
    return row


def build_dashboard(submissions, team=None):
    selected = filter_by_team(submissions, team)
    counts = role_counts(selected)
    return {
        'total_submissions': len(selected),
        'team': team,
        'teams': sorted({s.get('team') or UNASSIGNED_TEAM for s in submissions}),
        'primary_counts': counts['primary_counts'],
        'secondary_counts': counts['secondary_counts'],
        'confidence_band_counts': counts['confidence_band_counts'],
        'risk_insights': risk_insights(selected, counts),
        'leadership_translation': leadership_translation(selected, counts),
        'team_composition': team_composition(selected),
    }
