# writing_practice/services/fallback_grader.py
from writing_practice.schemas.evaluator_schemas import MAX_MARKS, Feedback, GradingResult

WORDS_PER_MARK = 25

FALLBACK_FEEDBACK = Feedback(
    strengths="Relevant ideas and clear expression.",
    weaknesses="Structure could be improved.",
    suggestions="Add examples and use a more formal tone.",
)


def fallback_grade(answer_text: str) -> GradingResult:
    """
    Deterministic, content-agnostic grade used whenever the AI grader gives no result.
    One mark per WORDS_PER_MARK words, capped at MAX_MARKS.
    """
    words = len((answer_text or "").split())
    return GradingResult(
        marks=min(MAX_MARKS, words // WORDS_PER_MARK),
        max_marks=MAX_MARKS,
        feedback=FALLBACK_FEEDBACK.model_copy(),
    )
