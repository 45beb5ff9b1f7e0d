# writing_practice/core/question_store.py
import logging
import random
import re
from pathlib import Path
from typing import Dict, List, Optional

from writing_practice.core.errors import (
    InvalidCategoryError,
    NoQuestionsFoundError,
    StorageUnavailableError,
)

logger = logging.getLogger(__name__)

# Category -> question bank file
QUESTION_FILES: Dict[str, str] = {
    "letter": "letter.txt",
    "essay": "essay.txt",
    "report": "report.txt",
    "email": "email.txt",
    "comprehension": "comprehension.txt",
    "situation": "situation.txt",
    "precise": "precise.txt",
}

DELIMITER = "===QUESTION==="
_BLANK_LINES = re.compile(r"\n{2,}")

# Process-wide source for production sampling
_system_random = random.SystemRandom()


def normalize_category(category: str) -> str:
    key = (category or "").strip().lower()
    if key not in QUESTION_FILES:
        raise InvalidCategoryError()
    return key


def parse_questions(content: str) -> List[str]:
    """
    Split a bank into question units.

    A bank that contains DELIMITER is split on it and nothing else, so
    multi-paragraph questions survive intact. Otherwise every run of two or
    more line breaks separates questions. Empty units are dropped.
    """
    content = content.replace("\r\n", "\n")
    if DELIMITER in content:
        parts = content.split(DELIMITER)
    else:
        parts = _BLANK_LINES.split(content)
    return [p.strip() for p in parts if p.strip()]


class QuestionStore:
    """
    Reads category banks from a directory. No caching: every call re-reads the file.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def path_for(self, category: str) -> Path:
        return self.base_dir / QUESTION_FILES[normalize_category(category)]

    def load(self, category: str) -> List[str]:
        path = self.path_for(category)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading question file {path}: {e}")
            raise StorageUnavailableError() from e
        return parse_questions(content)

    def fetch_question(self, category: str, rng: Optional[random.Random] = None) -> str:
        questions = self.load(category)
        if not questions:
            raise NoQuestionsFoundError()
        return (rng or _system_random).choice(questions)
