# questions/role_playbooks.py
# Practical guidance per role: strengths, best use, pitfalls, and how to
# support or contribute. best_used_for feeds the stored recommendations.
from questions.roles import split_role_string

ROLE_PLAYBOOKS = {
    "BE": {
        "role_label": "Backend-Focused Analyst",
        "strengths": [
            "Spots root causes in messy logic/data chains",
            "Handles ambiguity without panicking",
            "Builds durable fixes instead of band-aids",
            "Thinks in systems and dependencies",
            "Optimizes processes once understood",
        ],
        "best_used_for": [
            "Tracing metric discrepancies to the source definition/logic",
            "Fixing broken transformations, joins, mappings, refresh issues",
            "Designing robust calculations/semantic rules",
            "Debugging complex pipelines where multiple steps interact",
            "Hardening logic so it doesn't break next month",
        ],
        "watch_out_for": [
            "Over-investigating when urgency demands a temporary containment plan",
            "Communicating in overly technical detail",
            "Underestimating the \"human usability\" of outputs",
        ],
        "how_to_support_you": [
            "Give clear definition of \"done\" and impact scope",
            "Protect focus time during investigations",
            "Pair with PM/QA for rollout + validation",
        ],
        "how_to_contribute_if_not_primary": [
            "Ask clarifying questions about definitions and logic; fresh eyes catch assumptions",
            "Help document findings and create user-friendly summaries",
            "Support validation and testing of fixes before rollout",
            "Contribute domain knowledge about how the data is actually used",
            "Assist with stakeholder communication and change management",
        ],
    },
    "FE": {
        "role_label": "Frontend-Focused Analyst",
        "strengths": [
            "Makes outputs intuitive and easy to consume",
            "Notices confusion points and fixes them fast",
            "Strong presentation clarity and empathy for end users",
            "Iterates quickly with feedback",
            "Great at \"what the user will misunderstand\"",
        ],
        "best_used_for": [
            "Improving dashboard layout, flow, labeling, and usability",
            "Turning complex results into clear executive narrative",
            "Enhancing adoption: training guides, tooltips, examples",
            "Refining user-facing definitions to reduce confusion",
            "Rapid prototyping for stakeholder feedback",
        ],
        "watch_out_for": [
            "Prioritizing polish over correctness",
            "Making changes without strong validation",
            "Getting stuck in feedback loops without closure",
        ],
        "how_to_support_you": [
            "Pair with QA to validate accuracy",
            "Provide real user feedback quickly",
            "Timebox iterations with clear decision owners",
        ],
        "how_to_contribute_if_not_primary": [
            "Provide technical validation and accuracy checks",
            "Help identify edge cases and potential data quality issues",
            "Contribute to documentation and training materials",
            "Support coordination and communication with stakeholders",
            "Assist with root cause analysis when issues arise",
        ],
    },
    "QA": {
        "role_label": "QA-Focused Analyst",
        "strengths": [
            "Catches errors and inconsistencies early",
            "Thinks in edge cases and \"what could break\"",
            "Methodical, repeatable verification",
            "Protects trust in reporting",
            "Prevents rework by validating before release",
        ],
        "best_used_for": [
            "Building validation checklists for changes",
            "Regression testing: \"did we break anything else?\"",
            "Defining acceptance criteria and sanity checks",
            "Data quality checks and anomaly detection",
            "Ensuring definitions are consistent across modules",
        ],
        "watch_out_for": [
            "Slowing delivery when the risk is low",
            "Over-testing low-impact changes",
            "Needing clearer priorities when everything feels risky",
        ],
        "how_to_support_you": [
            "Define risk tier (low/med/high) per change",
            "Provide clear acceptance criteria",
            "Give authority to block releases when necessary",
        ],
        "how_to_contribute_if_not_primary": [
            "Help improve usability and clarity of outputs",
            "Contribute to coordination and stakeholder communication",
            "Assist with root cause analysis and investigation",
            "Support documentation and knowledge sharing",
            "Provide domain expertise and business context",
        ],
    },
    "PM": {
        "role_label": "PM/Ops-Focused Analyst",
        "strengths": [
            "Prioritizes under pressure",
            "Clarifies scope and prevents chaos",
            "Spots operational risks early",
            "Strong coordination and communication",
            "Converts ambiguity into a plan",
        ],
        "best_used_for": [
            "Coordinating work, owners, timelines, and releases",
            "Managing backlog, triage, and stakeholder comms",
            "Setting definitions, SLAs, and \"what matters most\"",
            "Running post-issue reviews and prevention actions",
            "Ensuring changes are controlled, documented, and sustainable",
        ],
        "watch_out_for": [
            "Over-coordinating and under-executing",
            "Prioritizing process over outcomes",
            "Avoiding deep dives when a root cause is needed",
        ],
        "how_to_support_you": [
            "Assign clear technical owners for investigations",
            "Provide visibility into constraints and effort",
            "Agree on decision rules (what blocks release, what doesn't)",
        ],
        "how_to_contribute_if_not_primary": [
            "Take on technical investigations and root cause analysis",
            "Help improve outputs for clarity and usability",
            "Support validation and quality assurance efforts",
            "Contribute domain expertise and user perspective",
            "Assist with documentation and knowledge transfer",
        ],
    },
}


def get_role_playbook(role_id):
    return ROLE_PLAYBOOKS.get(role_id)


def get_role_playbook_by_string(role_string):
    """Resolve 'BE' or a compound 'BE + FE' to a playbook, using the first role."""
    roles = split_role_string(role_string)
    if not roles:
        return None
    return ROLE_PLAYBOOKS.get(roles[0])


def recommendations_for(primary_role, secondary_role=None):
    """Return (primary_recommendations, secondary_recommendations) lists."""
    primary = get_role_playbook_by_string(primary_role)
    secondary = get_role_playbook(secondary_role) if secondary_role else None
    return (
        list(primary["best_used_for"]) if primary else [],
        list(secondary["best_used_for"]) if secondary else [],
    )
