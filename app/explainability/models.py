"""
Explainability Models

Pydantic models for the results breakdown shown next to a verdict.

The breakdown explains a verdict; it never changes one.

Version: explainability_v1
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from app.verdict.models import Verdict


class SelectedOptionExplanation(BaseModel):
    """Interpretation of one selected option."""
    option_id: str
    label: str
    impact: int
    impact_label: str
    points: int
    hard_stop: bool = False
    interpretation: str


class QuestionBreakdown(BaseModel):
    """
    Review row for a single question.

    max_impact is 0 when the question was left unanswered.
    """
    question_id: str
    section: str
    title: str
    selected: List[SelectedOptionExplanation] = Field(default_factory=list)
    max_impact: int = 0
    max_impact_label: str = "Supportive"


class PrimaryConstraint(BaseModel):
    """One of the biggest drivers behind a result."""
    question_id: str
    question_title: str
    option_id: str
    option_label: str
    impact: int
    impact_label: str
    points: int
    interpretation: str


class AssessmentExplanation(BaseModel):
    """
    Verdict plus everything a results page needs to justify it.
    """
    verdict: Verdict
    primary_constraints: List[PrimaryConstraint] = Field(
        default_factory=list,
        description="At most three, one per question, wood floor first"
    )
    breakdown: List[QuestionBreakdown] = Field(
        default_factory=list,
        description="One row per question in presentation order"
    )
    disclaimer: Dict[str, str] = Field(default_factory=dict)
    version: str = "explainability_v1"
