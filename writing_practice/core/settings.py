# writing_practice/core/settings.py
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_QUESTIONS_DIR = Path(__file__).resolve().parent.parent / "questions"


def _split_csv(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read from the environment (and `.env` via python-dotenv).
    """

    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    grading_model: str = "gpt-4o-mini"
    grading_temperature: float = 0.4
    grading_max_tokens: int = 600
    grading_timeout_seconds: float = 30.0

    questions_dir: Path = DEFAULT_QUESTIONS_DIR
    min_answer_words: int = 1

    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
            openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
            grading_model=os.getenv("GRADING_MODEL", "gpt-4o-mini"),
            grading_temperature=float(os.getenv("GRADING_TEMPERATURE", "0.4")),
            grading_max_tokens=int(os.getenv("GRADING_MAX_TOKENS", "600")),
            grading_timeout_seconds=float(os.getenv("GRADING_TIMEOUT_SECONDS", "30")),
            questions_dir=Path(os.getenv("QUESTIONS_DIR", str(DEFAULT_QUESTIONS_DIR))),
            min_answer_words=int(os.getenv("MIN_ANSWER_WORDS", "1")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "3000")),
            cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
