"""
Explainability Test Suite

Validates:
- Impact label rules
- Per-question breakdown
- Primary constraint ranking
- No logic changes (pure explanation layer)

Version: explainability_v1
"""

import pytest

from app.explainability import (
    build_breakdown,
    explain,
    impact_label,
    primary_constraints,
)
from app.rules import QUESTIONS
from app.verdict import evaluate


RISKY_ANSWERS = {
    "context_location": "attached",
    "floor_type": "wood_living",
    "ceiling_height": "h_8_9",
    "above_space": "attic",
    "neighbors": "lt20",
    "use_cases": ["amps", "drums"],
    "time_of_use": "day",
    "expectation": "not_notice",
    "mods": "yes",
    "ventilation": "vent_yes",
    "budget": "b_lt10",
    "mindset": "try_anyway",
}


class TestImpactLabel:

    @pytest.mark.parametrize("impact,label", [
        (0, "Supportive"),
        (1, "Minor"),
        (2, "Constraint"),
        (3, "Major"),
        (4, "Blocker"),
        (7, "Blocker"),
    ])
    def test_labels(self, impact, label):
        assert impact_label(impact) == label


class TestBreakdown:

    def test_one_row_per_question(self):
        rows = build_breakdown(RISKY_ANSWERS)
        assert [r.question_id for r in rows] == [q.id for q in QUESTIONS]

    def test_max_impact_over_multiple_selection(self):
        rows = {r.question_id: r for r in build_breakdown(RISKY_ANSWERS)}
        use_cases = rows["use_cases"]
        assert [s.option_id for s in use_cases.selected] == ["amps", "drums"]
        assert use_cases.max_impact == 3
        assert use_cases.max_impact_label == "Major"

    def test_unanswered_row(self):
        rows = {r.question_id: r for r in build_breakdown({})}
        assert rows["budget"].selected == []
        assert rows["budget"].max_impact == 0
        assert rows["budget"].max_impact_label == "Supportive"

    def test_interpretation_carried(self):
        rows = {r.question_id: r for r in build_breakdown(RISKY_ANSWERS)}
        assert "fundamentally limited" in rows["floor_type"].selected[0].interpretation


class TestPrimaryConstraints:

    def test_wood_floor_first(self):
        top = primary_constraints(RISKY_ANSWERS)
        assert top[0].question_id == "floor_type"
        assert top[0].option_id == "wood_living"

    def test_ranked_by_impact_then_points(self):
        # impact 3 candidates: drums (5), budget b_lt10 (4), lt20 (3), try_anyway (3)
        top = primary_constraints(RISKY_ANSWERS)
        assert [c.question_id for c in top] == ["floor_type", "use_cases", "budget"]

    def test_one_per_question(self):
        top = primary_constraints(RISKY_ANSWERS, limit=10)
        ids = [c.question_id for c in top]
        assert len(ids) == len(set(ids))
        use_cases = next(c for c in top if c.question_id == "use_cases")
        assert use_cases.option_id == "drums"

    def test_limit(self):
        assert len(primary_constraints(RISKY_ANSWERS)) == 3
        assert len(primary_constraints(RISKY_ANSWERS, limit=1)) == 1

    def test_minor_answers_excluded(self):
        answers = {"context_location": "attached", "neighbors": "family", "floor_type": "slab"}
        assert primary_constraints(answers) == []

    def test_blockers_outrank_majors(self):
        answers = {"budget": "b_lt10", "ventilation": "vent_no"}
        top = primary_constraints(answers)
        assert top[0].question_id == "ventilation"
        assert top[0].impact_label == "Blocker"


class TestFullExplanation:

    def test_explain_bundles_everything(self):
        result = explain(RISKY_ANSWERS)
        assert result.verdict == evaluate(RISKY_ANSWERS)
        assert len(result.breakdown) == len(QUESTIONS)
        assert result.primary_constraints
        assert result.disclaimer["version"] == "disclaimer_v1.0"

    def test_explain_does_not_change_verdict(self):
        verdict = evaluate(RISKY_ANSWERS)
        result = explain(RISKY_ANSWERS, verdict=verdict)
        assert result.verdict == verdict
        assert result.verdict.light == verdict.light
