import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from writing_practice.core.dependencies import get_evaluation_service
from writing_practice.core.errors import WritingPracticeError
from writing_practice.schemas.evaluator_schemas import (
    ErrorResponse,
    EvaluationResponse,
    SubmitRequest,
)
from writing_practice.services.evaluation_service import EvaluationService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/api/submit/{category}",
    response_model=EvaluationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit(
    category: str,
    request: Optional[SubmitRequest] = None,
    service: EvaluationService = Depends(get_evaluation_service),
):
    try:
        answer = request.answer if request is not None else None
        return await service.submit(category, answer)
    except WritingPracticeError:
        raise
    except Exception as e:
        logger.error(f"Evaluation failed for category '{category}': {e}")
        raise HTTPException(status_code=500, detail="AI evaluation failed. Please try again.")
