"""
Tag/Score Aggregator

Walks the answer set against the rule table and produces:
1. The union of triggered tags
2. The total accumulated points
3. Whether any explicit hard-stop option was chosen

PURE: same answers -> same aggregate. Unknown ids are ignored, not errors,
so stale answer sets survive rule-table edits.
"""

import logging
from typing import Dict, List, Sequence

from app.rules.answers import Answers, selected_ids
from app.rules.models import Question, Tag
from app.rules.questions import QUESTIONS

from .models import Aggregate, Selection

logger = logging.getLogger(__name__)


def resolve_selections(
    answers: Answers,
    questions: Sequence[Question] = QUESTIONS,
) -> List[Selection]:
    """Resolve selected option ids to (question, option) pairs in table order."""
    selections: List[Selection] = []
    for question in questions:
        for option_id in selected_ids(answers, question.id):
            option = question.option(option_id)
            if option is None:
                continue
            selections.append(Selection(question=question, option=option))
    return selections


def _ignored_refs(answers: Answers, questions: Sequence[Question]) -> List[str]:
    index: Dict[str, Question] = {q.id: q for q in questions}
    ignored: List[str] = []
    for question_id in answers:
        question = index.get(question_id)
        if question is None:
            if selected_ids(answers, question_id):
                ignored.append(question_id)
            continue
        for option_id in selected_ids(answers, question_id):
            if question.option(option_id) is None:
                ignored.append(f"{question_id}.{option_id}")
    return ignored


def aggregate(
    answers: Answers,
    questions: Sequence[Question] = QUESTIONS,
) -> Aggregate:
    """
    Aggregate tags, points and the explicit hard-stop flag.

    Unanswered questions contribute nothing.
    """
    selections = resolve_selections(answers, questions)

    tags: Dict[Tag, None] = {}
    points = 0
    hard_stop_triggered = False

    for sel in selections:
        for tag in sel.option.tags:
            tags.setdefault(tag, None)
        points += sel.option.points
        if sel.option.hard_stop:
            hard_stop_triggered = True

    ignored = _ignored_refs(answers, questions)
    if ignored:
        logger.debug(f"Ignoring unknown answer references: {', '.join(ignored)}")

    logger.debug(
        f"Aggregated {len(selections)} selections: points={points} "
        f"hard_stop={hard_stop_triggered} tags={len(tags)}"
    )

    return Aggregate(
        tags=tuple(tags),
        points=points,
        hard_stop_triggered=hard_stop_triggered,
        selections=tuple(selections),
        ignored=tuple(ignored),
    )
