# writing_practice/routers/questions.py
import random

from fastapi import APIRouter, Depends

from writing_practice.core.dependencies import get_evaluation_service, get_rng
from writing_practice.core.question_store import QUESTION_FILES
from writing_practice.schemas.evaluator_schemas import (
    CategoriesResponse,
    ErrorResponse,
    QuestionResponse,
)
from writing_practice.services.evaluation_service import EvaluationService

router = APIRouter()


@router.get("/api/categories", response_model=CategoriesResponse)
async def list_categories():
    return CategoriesResponse(categories=list(QUESTION_FILES))


@router.get(
    "/api/question/{category}",
    response_model=QuestionResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def get_question(
    category: str,
    service: EvaluationService = Depends(get_evaluation_service),
    rng: random.Random = Depends(get_rng),
):
    # Errors are rendered by the WritingPracticeError handler in main.py
    return QuestionResponse(question=service.fetch_question(category, rng=rng))
