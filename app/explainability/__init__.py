"""
Assessment Explainability Module

Purpose: make a verdict understandable without touching it.

This module does NOT:
- Change points
- Change tiers
- Change the light level

This module ONLY:
- Labels the impact of each answer
- Builds a per-question review breakdown
- Ranks the primary constraints behind a result
- Attaches the locked disclaimer copy

Version: explainability_v1
"""

from .models import (
    AssessmentExplanation,
    PrimaryConstraint,
    QuestionBreakdown,
    SelectedOptionExplanation,
)
from .explain import (
    build_breakdown,
    explain,
    impact_label,
    primary_constraints,
)

__all__ = [
    # Models
    "AssessmentExplanation",
    "PrimaryConstraint",
    "QuestionBreakdown",
    "SelectedOptionExplanation",
    # Functions
    "build_breakdown",
    "explain",
    "impact_label",
    "primary_constraints",
]

__version__ = "explainability_v1"
