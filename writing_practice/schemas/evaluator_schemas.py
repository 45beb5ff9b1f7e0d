# writing_practice/schemas/evaluator_schemas.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_MARKS = 10


class Feedback(BaseModel):
    strengths: str
    weaknesses: str
    suggestions: str


class GradingResult(BaseModel):
    """Grading contract shared by the AI grader and the fallback grader."""

    model_config = ConfigDict(populate_by_name=True)

    marks: int = Field(ge=0, le=MAX_MARKS)
    max_marks: int = Field(default=MAX_MARKS, alias="maxMarks")
    feedback: Feedback


class SimilarityResult(BaseModel):
    best_match_score: float = Field(default=0.0, ge=0.0, le=1.0)
    matched_unit: Optional[str] = None


class EvaluationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    marks: int
    max_marks: int = Field(alias="maxMarks")
    feedback: Feedback
    user_answer: str = Field(alias="userAnswer")


# ---------------- API payloads ----------------
class SubmitRequest(BaseModel):
    answer: Optional[str] = None


class QuestionResponse(BaseModel):
    question: str


class CategoriesResponse(BaseModel):
    categories: List[str]


class ErrorResponse(BaseModel):
    error: str
