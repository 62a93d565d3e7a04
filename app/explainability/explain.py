"""
Explainability Core Logic

Builds the results breakdown from an answer set.
Does NOT modify decisions - only explains them.

Principle: The engine decides. The breakdown explains. Never the reverse.

Version: explainability_v1
"""

from typing import List, Optional

from app.rules.answers import Answers
from app.rules.models import Impact
from app.rules.questions import QUESTIONS
from app.scoring.aggregate import resolve_selections
from app.scoring.models import Selection
from app.shared.disclaimer import get_disclaimer
from app.verdict.evaluate import evaluate
from app.verdict.models import Verdict

from .models import (
    AssessmentExplanation,
    PrimaryConstraint,
    QuestionBreakdown,
    SelectedOptionExplanation,
)


# Floor options that cap isolation regardless of anything else
WOOD_FLOOR_OPTIONS = frozenset([
    ("floor_type", "wood_crawl"),
    ("floor_type", "wood_living"),
])

PRIMARY_CONSTRAINT_MIN_IMPACT = Impact.CONSTRAINT
PRIMARY_CONSTRAINT_LIMIT = 3


# ============================================================
# IMPACT LABELS
# ============================================================

def impact_label(impact: int) -> str:
    """
    Human-readable impact label.

    >=4 Blocker, >=3 Major, >=2 Constraint, >=1 Minor, else Supportive.
    """
    if impact >= Impact.BLOCKER:
        return "Blocker"
    if impact >= Impact.MAJOR:
        return "Major"
    if impact >= Impact.CONSTRAINT:
        return "Constraint"
    if impact >= Impact.MINOR:
        return "Minor"
    return "Supportive"


# ============================================================
# PER-QUESTION BREAKDOWN
# ============================================================

def _explain_selection(sel: Selection) -> SelectedOptionExplanation:
    opt = sel.option
    return SelectedOptionExplanation(
        option_id=opt.id,
        label=opt.label,
        impact=int(opt.impact),
        impact_label=impact_label(opt.impact),
        points=opt.points,
        hard_stop=opt.hard_stop,
        interpretation=opt.interpretation,
    )


def build_breakdown(answers: Answers) -> List[QuestionBreakdown]:
    """
    One review row per question, in presentation order.
    """
    selections = resolve_selections(answers)
    rows: List[QuestionBreakdown] = []

    for question in QUESTIONS:
        picked = [s for s in selections if s.question.id == question.id]
        max_impact = max((int(s.option.impact) for s in picked), default=0)
        rows.append(QuestionBreakdown(
            question_id=question.id,
            section=question.section,
            title=question.title,
            selected=[_explain_selection(s) for s in picked],
            max_impact=max_impact,
            max_impact_label=impact_label(max_impact),
        ))

    return rows


# ============================================================
# PRIMARY CONSTRAINTS
# ============================================================

def _constraint_sort_key(sel: Selection):
    is_wood = (sel.question.id, sel.option.id) in WOOD_FLOOR_OPTIONS
    return (0 if is_wood else 1, -int(sel.option.impact), -sel.option.points)


def primary_constraints(
    answers: Answers,
    limit: int = PRIMARY_CONSTRAINT_LIMIT,
) -> List[PrimaryConstraint]:
    """
    The biggest drivers behind a result.

    Rules:
    - Only options with impact >= 2
    - Wood floor answers first, then impact desc, then points desc
    - At most one entry per question
    - At most `limit` entries
    """
    candidates = [
        s for s in resolve_selections(answers)
        if s.option.impact >= PRIMARY_CONSTRAINT_MIN_IMPACT
    ]
    # sorted() is stable, so ties keep presentation order
    candidates = sorted(candidates, key=_constraint_sort_key)

    seen = set()
    top: List[PrimaryConstraint] = []
    for sel in candidates:
        if sel.question.id in seen:
            continue
        seen.add(sel.question.id)
        top.append(PrimaryConstraint(
            question_id=sel.question.id,
            question_title=sel.question.title,
            option_id=sel.option.id,
            option_label=sel.option.label,
            impact=int(sel.option.impact),
            impact_label=impact_label(sel.option.impact),
            points=sel.option.points,
            interpretation=sel.option.interpretation,
        ))
        if len(top) >= limit:
            break

    return top


# ============================================================
# FULL EXPLANATION
# ============================================================

def explain(answers: Answers, verdict: Optional[Verdict] = None) -> AssessmentExplanation:
    """
    Verdict + primary constraints + breakdown + disclaimer.

    Pass a precomputed verdict to avoid evaluating twice.
    """
    if verdict is None:
        verdict = evaluate(answers)

    return AssessmentExplanation(
        verdict=verdict,
        primary_constraints=primary_constraints(answers),
        breakdown=build_breakdown(answers),
        disclaimer=get_disclaimer(),
    )
