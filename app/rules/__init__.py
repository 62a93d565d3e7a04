"""
Rule Table Module

Static questionnaire definition for the soundproof studio site assessment.

Design Principles:
- DATA, not behavior: every option is scored the same way
- IMMUTABLE: frozen records, loaded once at import
- VALIDATED: a malformed table raises RuleTableError on import

Version: rule_table_v1
"""

from .models import (
    HARD_STOP_POINTS,
    CapabilityTier,
    Impact,
    LightLevel,
    Option,
    Question,
    Tag,
)
from .questions import (
    QUESTIONS,
    TIER_THRESHOLDS,
    get_question,
    get_rule_table_version,
)
from .validate import (
    RuleTableError,
    assert_rule_table_valid,
    validate_question,
    validate_rule_table,
)
from .answers import (
    Answers,
    AnswerValue,
    UnknownQuestionError,
    as_list,
    empty_answers,
    is_complete,
    missing_required,
    selected_ids,
    toggle_option,
)

assert_rule_table_valid(QUESTIONS)

__all__ = [
    # Models
    "HARD_STOP_POINTS",
    "CapabilityTier",
    "Impact",
    "LightLevel",
    "Option",
    "Question",
    "Tag",
    # Table
    "QUESTIONS",
    "TIER_THRESHOLDS",
    "get_question",
    "get_rule_table_version",
    # Validation
    "RuleTableError",
    "assert_rule_table_valid",
    "validate_question",
    "validate_rule_table",
    # Answers
    "Answers",
    "AnswerValue",
    "UnknownQuestionError",
    "as_list",
    "empty_answers",
    "is_complete",
    "missing_required",
    "selected_ids",
    "toggle_option",
]

__version__ = "rule_table_v1"
