# writing_practice/services/evaluation_service.py
import asyncio
import logging
import random
from typing import Optional

from writing_practice.agents.grading_agent import GradingAgent
from writing_practice.core.errors import EmptyAnswerError
from writing_practice.core.question_store import QuestionStore
from writing_practice.schemas.evaluator_schemas import EvaluationResponse
from writing_practice.services.result_composer import compose
from writing_practice.services.similarity import score_category

logger = logging.getLogger(__name__)


def validate_answer(answer: Optional[str], min_words: int = 1) -> str:
    if not answer or not answer.strip():
        raise EmptyAnswerError()
    words = len(answer.split())
    if words < min_words:
        raise EmptyAnswerError(f"Answer is too short: at least {min_words} words are required")
    return answer


class EvaluationService:
    """
    The two entry points the HTTP layer calls: fetch a practice question and
    evaluate a submitted answer.
    """

    def __init__(self, store: QuestionStore, grader: GradingAgent, min_answer_words: int = 1):
        self.store = store
        self.grader = grader
        self.min_answer_words = min_answer_words

    def fetch_question(self, category: str, rng: Optional[random.Random] = None) -> str:
        return self.store.fetch_question(category, rng=rng)

    async def submit(self, category: str, answer: str) -> EvaluationResponse:
        validate_answer(answer, self.min_answer_words)
        category = (category or "").strip().lower()

        # Independent reads over the same bank; run side by side
        similarity, grading = await asyncio.gather(
            asyncio.to_thread(score_category, self.store, category, answer),
            self.grader.grade(category, answer),
        )
        logger.info(
            f"Evaluated '{category}' answer: marks={grading.marks}, "
            f"similarity={similarity.best_match_score:.2f}"
        )
        return compose(grading, similarity, user_answer=answer)
