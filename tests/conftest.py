"""
Shared fixtures: temporary question banks, a stub LLM client and an API
client wired to both. Zero network calls.
"""
import random

import pytest
from fastapi.testclient import TestClient

from writing_practice.agents.grading_agent import GradingAgent
from writing_practice.core.dependencies import (
    get_grading_agent,
    get_question_store,
    get_rng,
)
from writing_practice.core.question_store import QuestionStore
from writing_practice.core.settings import Settings, get_settings

ESSAY_QUESTIONS = [
    "Discuss the impact of digital payments on rural households.",
    "Should financial literacy be taught in every school?",
    "Write an essay on the role of renewable energy in economic growth.",
]

LETTER_QUESTIONS = [
    "Write a letter to your bank manager about a failed ATM transaction.\n\nMention the date and the amount debited.",
    "Write a letter to the editor about the poor condition of roads.",
]


class StubLLM:
    """Stands in for LLMClient: returns `reply` or raises `error`, and records calls."""

    def __init__(self, reply: str = "", error: Exception = None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def chat(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def bank_dir(tmp_path):
    """A questions directory with an essay bank (blank-line separated),
    a letter bank (delimiter separated) and an empty email bank."""
    (tmp_path / "essay.txt").write_text("\n\n".join(ESSAY_QUESTIONS) + "\n", encoding="utf-8")
    letter = "".join(f"===QUESTION===\n{q}\n" for q in LETTER_QUESTIONS)
    (tmp_path / "letter.txt").write_text(letter, encoding="utf-8")
    (tmp_path / "email.txt").write_text("\n\n   \n\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def essay_questions():
    return list(ESSAY_QUESTIONS)


@pytest.fixture
def letter_questions():
    return list(LETTER_QUESTIONS)


@pytest.fixture
def store(bank_dir):
    return QuestionStore(bank_dir)


@pytest.fixture
def stub_llm():
    return StubLLM(reply='{"marks": 7, "maxMarks": 10, "feedback": '
                         '{"strengths": "Clear.", "weaknesses": "Brief.", "suggestions": "Expand."}}')


@pytest.fixture
def api(bank_dir, stub_llm):
    """TestClient with the question store, grader and random source overridden."""
    from writing_practice.main import app

    app.dependency_overrides[get_settings] = lambda: Settings(questions_dir=bank_dir)
    app.dependency_overrides[get_question_store] = lambda: QuestionStore(bank_dir)
    app.dependency_overrides[get_grading_agent] = lambda: GradingAgent(stub_llm)
    app.dependency_overrides[get_rng] = lambda: random.Random(7)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_llm():
    """Factory for StubLLM instances with a custom reply or error."""
    return StubLLM
