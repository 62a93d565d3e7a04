"""
Rule Table Validation

Structural checks for the questionnaire table.

Principle: a malformed table must fail loudly at import, never at scoring.

Version: rule_table_v1
"""

from typing import Iterable, List, Set

from .models import HARD_STOP_POINTS, Impact, Question


class RuleTableError(ValueError):
    """Raised when the rule table violates a structural invariant."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("Invalid rule table: " + "; ".join(problems))


def validate_question(question: Question) -> List[str]:
    """
    Validate a single question.

    Rules:
    - At least one option
    - Option ids unique within the question
    - Impact in [0, 4]
    - Points non-negative
    - Hard-stop options carry at least HARD_STOP_POINTS
    """
    problems: List[str] = []

    if not question.options:
        problems.append(f"{question.id}: no options")

    seen: Set[str] = set()
    for opt in question.options:
        ref = f"{question.id}.{opt.id}"
        if opt.id in seen:
            problems.append(f"{ref}: duplicate option id")
        seen.add(opt.id)

        if not Impact.SUPPORTIVE <= opt.impact <= Impact.BLOCKER:
            problems.append(f"{ref}: impact {opt.impact} outside 0-4")

        if opt.points < 0:
            problems.append(f"{ref}: negative points {opt.points}")

        if opt.hard_stop and opt.points < HARD_STOP_POINTS:
            problems.append(
                f"{ref}: hard stop carries {opt.points} points, expected >= {HARD_STOP_POINTS}"
            )

    return problems


def validate_rule_table(questions: Iterable[Question]) -> List[str]:
    """
    Validate the whole table. Returns a list of problems, empty when valid.
    """
    problems: List[str] = []
    seen: Set[str] = set()

    for question in questions:
        if question.id in seen:
            problems.append(f"{question.id}: duplicate question id")
        seen.add(question.id)
        problems.extend(validate_question(question))

    return problems


def assert_rule_table_valid(questions: Iterable[Question]) -> None:
    problems = validate_rule_table(questions)
    if problems:
        raise RuleTableError(problems)
