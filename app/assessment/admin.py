"""
Site Assessment API Endpoints

FastAPI router exposing the rule table and the verdict engine.

Endpoints:
- GET  /api/v1/assessment/health        - Module health check
- GET  /api/v1/assessment/questions     - Rule table in presentation order
- POST /api/v1/assessment/evaluate      - Verdict for an answer set
- POST /api/v1/assessment/explain       - Verdict + breakdown + disclaimer
- GET  /api/v1/assessment/disclaimer    - Locked disclaimer copy
- POST /api/v1/assessment/answers/toggle - Select/deselect one option

Stateless: every request carries its full answer set.
"""

import logging
from datetime import datetime
from typing import Dict, List, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from app.config import get_book_call_url
from app.explainability.explain import explain
from app.explainability.models import AssessmentExplanation
from app.rules.answers import (
    UnknownQuestionError,
    as_list,
    missing_required,
    toggle_option,
)
from app.rules.questions import QUESTIONS, get_question, get_rule_table_version
from app.shared.disclaimer import get_disclaimer
from app.verdict.evaluate import evaluate
from app.verdict.models import ENGINE_VERSION, Verdict

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/assessment",
    tags=["assessment"],
)


# Request/Response models

AnswerPayload = Dict[str, Union[str, List[str], None]]


class EvaluateRequest(BaseModel):
    """Answer set to evaluate."""
    answers: AnswerPayload = Field(default_factory=dict)
    require_complete: bool = Field(
        default=False,
        description="If true, unanswered required questions are rejected with 422"
    )


class EvaluateResponse(BaseModel):
    success: bool = True
    verdict: Verdict
    book_call_url: str


class ExplainResponse(BaseModel):
    success: bool = True
    result: AssessmentExplanation
    book_call_url: str


class ToggleRequest(BaseModel):
    answers: AnswerPayload = Field(default_factory=dict)
    question_id: str
    option_id: str


class ToggleResponse(BaseModel):
    answers: AnswerPayload
    missing_required: List[str]
    complete: bool


def _check_answers(answers: AnswerPayload, require_complete: bool) -> None:
    """Reject shape violations and, if asked, incomplete answer sets."""
    for question_id, value in answers.items():
        question = get_question(question_id)
        if question is None or question.multiple:
            continue
        if len(as_list(value)) > 1:
            raise HTTPException(
                status_code=422,
                detail=f"Question '{question_id}' accepts a single option",
            )

    if require_complete:
        missing = missing_required(answers)
        if missing:
            raise HTTPException(
                status_code=422,
                detail={"error": "Unanswered required questions", "missing": missing},
            )


# ============================================================
# HEALTH CHECK
# ============================================================

@router.get("/health")
def assessment_health():
    return {
        "status": "ok",
        "module": "assessment",
        "version": ENGINE_VERSION,
        "rule_table_version": get_rule_table_version(),
        "question_count": len(QUESTIONS),
        "timestamp": datetime.utcnow().isoformat(),
    }


# ============================================================
# RULE TABLE
# ============================================================

@router.get("/questions")
def list_questions():
    """Questions and options in presentation order."""
    return {
        "rule_table_version": get_rule_table_version(),
        "count": len(QUESTIONS),
        "questions": [q.to_dict() for q in QUESTIONS],
    }


# ============================================================
# EVALUATION
# ============================================================

@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_answers(request: EvaluateRequest):
    _check_answers(request.answers, request.require_complete)
    try:
        verdict = evaluate(request.answers)
    except Exception as e:
        logger.error(f"Assessment evaluation failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to evaluate assessment: {str(e)}"
        )
    return EvaluateResponse(verdict=verdict, book_call_url=get_book_call_url())


@router.post("/explain", response_model=ExplainResponse)
def explain_answers(request: EvaluateRequest):
    _check_answers(request.answers, request.require_complete)
    try:
        result = explain(request.answers)
    except Exception as e:
        logger.error(f"Assessment explanation failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to explain assessment: {str(e)}"
        )
    return ExplainResponse(result=result, book_call_url=get_book_call_url())


@router.get("/disclaimer")
def disclaimer():
    return get_disclaimer()


# ============================================================
# ANSWER HELPERS
# ============================================================

@router.post("/answers/toggle", response_model=ToggleResponse)
def toggle_answer(request: ToggleRequest):
    try:
        answers = toggle_option(request.answers, request.question_id, request.option_id)
    except UnknownQuestionError:
        raise HTTPException(status_code=404, detail=f"Unknown question: {request.question_id}")

    missing = missing_required(answers)
    return ToggleResponse(answers=answers, missing_required=missing, complete=not missing)
