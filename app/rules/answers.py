"""
Answer Set Helpers

An answer set maps question id -> option id, list of option ids, or None.
These helpers never mutate their input; callers own session state.
"""

from typing import Dict, List, Mapping, Sequence, Union

from .models import Question
from .questions import QUESTIONS, get_question

AnswerValue = Union[str, List[str], None]
Answers = Mapping[str, AnswerValue]


class UnknownQuestionError(KeyError):
    """Raised when an answer targets a question that is not in the rule table."""


def as_list(value: AnswerValue) -> List[str]:
    """Normalize a stored answer value to a list of option ids."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def selected_ids(answers: Answers, question_id: str) -> List[str]:
    return as_list(answers.get(question_id))


def empty_answers(questions: Sequence[Question] = QUESTIONS) -> Dict[str, AnswerValue]:
    """Fresh answer set: [] for multi-select questions, None otherwise."""
    return {q.id: ([] if q.multiple else None) for q in questions}


def toggle_option(answers: Answers, question_id: str, option_id: str) -> Dict[str, AnswerValue]:
    """
    Select or deselect an option, returning a new answer set.

    Multi-select questions add or remove the id. Single-select questions
    replace the current selection.
    """
    question = get_question(question_id)
    if question is None:
        raise UnknownQuestionError(question_id)

    updated: Dict[str, AnswerValue] = dict(answers)
    picked = as_list(answers.get(question_id))

    if question.multiple:
        if option_id in picked:
            updated[question_id] = [x for x in picked if x != option_id]
        else:
            updated[question_id] = picked + [option_id]
    else:
        updated[question_id] = option_id

    return updated


def is_question_satisfied(question: Question, answers: Answers) -> bool:
    picked = selected_ids(answers, question.id)
    if question.multiple:
        return len(picked) > 0
    return len(picked) == 1


def missing_required(
    answers: Answers,
    questions: Sequence[Question] = QUESTIONS,
) -> List[str]:
    """Ids of required questions that are not yet answered, in table order."""
    return [
        q.id for q in questions
        if q.required and not is_question_satisfied(q, answers)
    ]


def is_complete(answers: Answers, questions: Sequence[Question] = QUESTIONS) -> bool:
    return not missing_required(answers, questions)
