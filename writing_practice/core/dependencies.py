# writing_practice/core/dependencies.py
import random
from typing import Optional

from fastapi import Depends

from writing_practice.agents.grading_agent import GradingAgent
from writing_practice.core.llm_client import LLMClient
from writing_practice.core.question_store import QuestionStore
from writing_practice.core.settings import Settings, get_settings
from writing_practice.services.evaluation_service import EvaluationService


def get_rng() -> Optional[random.Random]:
    # None -> the store's process-wide SystemRandom; tests override with a seeded Random
    return None


def get_question_store(settings: Settings = Depends(get_settings)) -> QuestionStore:
    return QuestionStore(settings.questions_dir)


def get_grading_agent(settings: Settings = Depends(get_settings)) -> GradingAgent:
    return GradingAgent(LLMClient(settings))


def get_evaluation_service(
    settings: Settings = Depends(get_settings),
    store: QuestionStore = Depends(get_question_store),
    grader: GradingAgent = Depends(get_grading_agent),
) -> EvaluationService:
    return EvaluationService(store, grader, min_answer_words=settings.min_answer_words)
