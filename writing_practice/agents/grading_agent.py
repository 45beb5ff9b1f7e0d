# writing_practice/agents/grading_agent.py
import logging
from dataclasses import dataclass
from typing import Optional, Union

from writing_practice.agents.agent_prompts.grading_prompt import grading_prompt, build_user_prompt
from writing_practice.core.errors import GradingUnavailableError, MalformedGradingOutputError
from writing_practice.core.llm_client import LLMClient
from writing_practice.core.output_parser import parse_grading_output
from writing_practice.schemas.evaluator_schemas import GradingResult
from writing_practice.services.fallback_grader import fallback_grade

logger = logging.getLogger(__name__)

GradingFailure = Union[GradingUnavailableError, MalformedGradingOutputError]


@dataclass
class GradingOutcome:
    """Either a contract-conforming result or the reason there is none."""

    result: Optional[GradingResult] = None
    error: Optional[GradingFailure] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


class GradingAgent:
    """
    Makes exactly one evaluation request per submission and never raises:
    no result from the service always resolves to the fallback grader.
    """

    def __init__(self, llm: LLMClient):
        self.llm = llm
        self.template = grading_prompt

    async def evaluate(self, category: str, answer: str) -> GradingOutcome:
        try:
            raw = await self.llm.chat(
                system_prompt=self.template,
                user_prompt=build_user_prompt(category, answer),
            )
        except GradingUnavailableError as e:
            return GradingOutcome(error=e)

        result = parse_grading_output(raw)
        if result is None:
            return GradingOutcome(error=MalformedGradingOutputError(raw=raw))
        return GradingOutcome(result=result)

    async def grade(self, category: str, answer: str) -> GradingResult:
        outcome = await self.evaluate(category, answer)
        if outcome.ok:
            return outcome.result

        if isinstance(outcome.error, MalformedGradingOutputError):
            logger.warning(f"Invalid AI JSON for category '{category}': {outcome.error.raw[:500]!r}")
        else:
            logger.warning(f"Grading service unavailable for category '{category}': {outcome.error.message}")

        logger.info("Using fallback grader")
        return fallback_grade(answer)

