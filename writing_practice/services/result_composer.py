# writing_practice/services/result_composer.py
import logging
import math

from writing_practice.schemas.evaluator_schemas import (
    EvaluationResponse,
    GradingResult,
    SimilarityResult,
)

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.7
PENALTY_SEVERITY = 0.5
VERBATIM_COPY_SCORE = 1.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def similarity_penalty(score: float, max_marks: int) -> int:
    return _round_half_up(score * max_marks * PENALTY_SEVERITY)


def compose(grading: GradingResult, similarity: SimilarityResult, user_answer: str) -> EvaluationResponse:
    """
    Merge a grading result with the originality check.

    Above SIMILARITY_THRESHOLD the marks lose `round(score * max_marks * 0.5)`
    (never below zero) and the weaknesses carry a disclosure note. A verbatim
    copy of a practice question scores zero.
    """
    max_marks = grading.max_marks
    marks = grading.marks
    feedback = grading.feedback.model_copy()
    score = similarity.best_match_score

    if score > SIMILARITY_THRESHOLD:
        penalty = similarity_penalty(score, max_marks)
        marks = max(0, marks - penalty)
        if score >= VERBATIM_COPY_SCORE:
            marks = 0
        percent = _round_half_up(score * 100)
        note = (
            f"Your answer is {percent}% similar to a practice question; "
            f"marks were reduced for lack of originality."
        )
        feedback.weaknesses = f"{feedback.weaknesses} {note}".strip()
        logger.info(f"Similarity penalty applied: score={score:.2f}, marks {grading.marks} -> {marks}")

    return EvaluationResponse(
        marks=min(max(marks, 0), max_marks),
        max_marks=max_marks,
        feedback=feedback,
        user_answer=user_answer,
    )
