# services/narrative_service.py
"""
Narrative text for a scoring result.

The narrative is rendered in two steps: ``build_narrative_context`` reduces
the scoring output to the facts the text needs, and ``render_narrative``
fills fixed templates from that context. Neither step touches I/O.
"""
from string import Template

from questions.roles import ROLES, split_role_string

# A secondary role is mentioned when its gap to the primary is within this
# fraction of the spread between the highest and lowest totals.
CLOSE_SCORE_RATIO = 0.2
MAX_REASONS = 2

OPENING_TEMPLATE = Template(
    "Based on your responses, your strongest alignment is with the $label role. $explanation"
)
TIED_SECONDARY_TEMPLATE = Template(
    "You also show strong alignment with the $label role. $explanation"
)
CLOSE_SECONDARY_TEMPLATE = Template(
    "You also show strong alignment with the $label role, with your scores being "
    "relatively balanced between these two areas. $explanation"
)
REASONS_HEADER = "Here's why this role fits you:"
REASON_TEMPLATE = Template('• Your response "$option_text" to "$prompt"')


def build_narrative_context(totals, primary_role, secondary_role, tie_detected,
                            contributions, question_lookup, roles=None):
    """
    Collect everything the narrative needs into a plain dict.

    contributions: list of {"question_id", "role_id", "score", "option_text"}
    question_lookup: mapping question id -> question dict
    """
    roles = roles or ROLES
    primary_ids = split_role_string(primary_role)
    compound = len(primary_ids) > 1

    primary_info = roles.get(primary_ids[0]) if primary_ids else None
    if compound:
        secondary_info = roles.get(primary_ids[1])
    else:
        secondary_info = roles.get(secondary_role) if secondary_role else None

    secondary_mode = None
    if secondary_info is not None:
        if tie_detected:
            secondary_mode = "tied"
        elif not compound and primary_info is not None:
            values = list(totals.values()) or [0]
            score_range = max(values) - min(values)
            difference = totals.get(primary_info["id"], 0) - totals.get(secondary_info["id"], 0)
            if difference <= score_range * CLOSE_SCORE_RATIO:
                secondary_mode = "close"

    relevant = [c for c in contributions if c["role_id"] in primary_ids]
    relevant.sort(key=lambda c: -c["score"])

    reasons = []
    for contribution in relevant[:MAX_REASONS]:
        question = question_lookup.get(contribution["question_id"])
        if question is None:
            continue
        reasons.append({
            "option_text": contribution["option_text"],
            "prompt": question["prompt"],
        })

    return {
        "primary": primary_info,
        "secondary": secondary_info,
        "secondary_mode": secondary_mode,
        "reasons": reasons,
    }


def render_narrative(context):
    """Render the narrative paragraphs from a context built above."""
    primary = context.get("primary")
    if primary is None:
        return ""

    paragraphs = [OPENING_TEMPLATE.substitute(label=primary["label"], explanation=primary["explanation"])]

    secondary = context.get("secondary")
    mode = context.get("secondary_mode")
    if secondary is not None and mode == "tied":
        paragraphs.append(TIED_SECONDARY_TEMPLATE.substitute(
            label=secondary["label"], explanation=secondary["explanation"]))
    elif secondary is not None and mode == "close":
        paragraphs.append(CLOSE_SECONDARY_TEMPLATE.substitute(
            label=secondary["label"], explanation=secondary["explanation"]))

    reasons = context.get("reasons") or []
    if reasons:
        lines = [REASONS_HEADER]
        lines.extend(REASON_TEMPLATE.substitute(**reason) for reason in reasons)
        paragraphs.append("\n".join(lines))

    return "\n\n".join(paragraphs).strip()


def generate_narrative(totals, primary_role, secondary_role, tie_detected,
                       contributions, question_lookup, roles=None):
    context = build_narrative_context(
        totals, primary_role, secondary_role, tie_detected,
        contributions, question_lookup, roles=roles,
    )
    return render_narrative(context)
