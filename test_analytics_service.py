from services.analytics_service import (
    build_dashboard,
    filter_by_team,
    format_role_label,
    leadership_translation,
    risk_insights,
    role_counts,
    score_spread,
    submission_row,
    team_composition,
    top_skill_tags,
)


def _sub(primary, secondary=None, band="Clear", team=None, **extra):
    data = {
        "submission_id": f"id-{primary}-{secondary}-{team}",
        "primary_role": primary,
        "secondary_role": secondary,
        "confidence_band": band,
        "team": team,
        "totals": {"BE": 4, "FE": 1, "QA": 0, "PM": 2},
    }
    data.update(extra)
    return data


def test_role_counts_split_compound_primary():
    counts = role_counts([_sub("BE + FE", "FE", "Hybrid"), _sub("BE", "QA", "Strong")])

    assert counts["primary_counts"] == {"BE": 2, "FE": 1}
    assert counts["secondary_counts"] == {"FE": 1, "QA": 1}
    assert counts["confidence_band_counts"] == {"Strong": 1, "Clear": 0, "Split": 0, "Hybrid": 1}


def test_risk_insights_flag_each_condition():
    submissions = [
        _sub("BE", "PM", "Split"),
        _sub("BE", "FE", "Hybrid"),
        _sub("QA", "BE", "Strong"),
    ]

    insights = risk_insights(submissions)

    assert insights[0] == "QA-style thinking is concentrated in 1 individual → elevated release risk"
    assert any("secondary PM traits" in i for i in insights)
    assert any("FE alignment is present but often secondary" in i for i in insights)
    assert any("No primary Frontend Engineer, Product Manager alignment" in i for i in insights)
    assert len(insights) == 4


def test_low_confidence_insight_needs_more_than_thirty_percent():
    balanced = [_sub(role, band="Strong") for role in ("BE", "FE", "QA", "QA", "QA", "PM")]
    balanced[0]["confidence_band"] = "Split"
    shaky = [dict(s, confidence_band="Split") for s in balanced]

    assert not any("Split/Hybrid" in i for i in risk_insights(balanced))
    assert any(i.startswith("6 individuals show Split/Hybrid") for i in risk_insights(shaky))


def test_no_insights_for_empty_team():
    assert risk_insights([]) == []
    assert leadership_translation([]) == ""


def test_leadership_translation_rules():
    single = leadership_translation([_sub("BE")])
    assert single == (
        "The team shows limited depth in Backend Engineer, limited coverage in secondary roles, "
        "and limited redundancy → consider cross-training."
    )

    team = [_sub("BE")] * 5 + [_sub("QA")] * 3 + [_sub("PM")]
    assert leadership_translation(team) == (
        "The team shows strong depth in Backend Engineer, strong coverage in "
        "Quality Assurance Engineer, and good redundancy."
    )


def test_team_composition_groups_unassigned():
    teams = team_composition([_sub("BE", team="Core"), _sub("FE + QA"), _sub("PM", team="")])

    assert set(teams) == {"Core", "Unassigned"}
    assert teams["Unassigned"]["total_members"] == 2
    assert teams["Unassigned"]["role_breakdown"] == {"FE": 1, "QA": 1, "PM": 1}


def test_filter_and_top_tags_and_spread():
    subs = [_sub("BE", team="Core"), _sub("FE", team=None)]
    assert [s["primary_role"] for s in filter_by_team(subs, "Core")] == ["BE"]
    assert [s["primary_role"] for s in filter_by_team(subs, "Unassigned")] == ["FE"]
    assert len(filter_by_team(subs, None)) == 2

    sub = _sub("BE", skill_profile={
        "tags": ["b", "a", "c", "d"],
        "tag_frequency": {"a": 1, "b": 3, "c": 1, "d": 2},
    })
    assert top_skill_tags(sub) == ["b", "d", "a"]
    assert top_skill_tags(_sub("BE")) == []
    assert score_spread({"BE": 4, "FE": 1, "QA": 0, "PM": 2}) == 4
    assert score_spread({}) == 0


def test_submission_row_and_dashboard():
    row = submission_row(_sub("BE + FE"))
    assert row["score_spread"] == 4
    assert row["primary_role_label"] == "Backend Engineer + Frontend Engineer"
    assert format_role_label("PM") == "Product Manager"

    dashboard = build_dashboard([_sub("BE", team="Core"), _sub("QA", team="Ops")], team="Core")
    assert dashboard["total_submissions"] == 1
    assert dashboard["teams"] == ["Core", "Ops"]
    assert dashboard["primary_counts"] == {"BE": 1}
