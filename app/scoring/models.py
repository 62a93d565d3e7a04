"""
Scoring Models

Intermediate results of walking an answer set against the rule table.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from app.rules.models import Option, Question, Tag


@dataclass(frozen=True)
class Selection:
    """A resolved (question, option) pair from the answer set."""
    question: Question
    option: Option


@dataclass(frozen=True)
class Aggregate:
    """
    Result of tag/score aggregation.

    tags are deduplicated, ordered by first appearance in rule-table order.
    """
    tags: Tuple[Tag, ...]
    points: int
    hard_stop_triggered: bool
    selections: Tuple[Selection, ...] = field(default_factory=tuple)
    ignored: Tuple[str, ...] = field(default_factory=tuple)

    def has(self, tag: Tag) -> bool:
        return tag in self.tags

    def tag_values(self) -> List[str]:
        return [t.value for t in self.tags]
