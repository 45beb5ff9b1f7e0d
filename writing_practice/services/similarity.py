# writing_practice/services/similarity.py
import logging
import re
from collections import Counter
from typing import List, Sequence

from writing_practice.core.errors import WritingPracticeError
from writing_practice.core.question_store import QuestionStore
from writing_practice.schemas.evaluator_schemas import SimilarityResult

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _normalize(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip().lower()


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def dice_coefficient(a: str, b: str) -> float:
    """
    Sørensen–Dice coefficient over character bigrams (multiset overlap).
    Case and whitespace runs are ignored.
    """
    a, b = _normalize(a), _normalize(b)
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0

    first, second = _bigrams(a), _bigrams(b)
    overlap = sum((first & second).values())
    total = sum(first.values()) + sum(second.values())
    return 2.0 * overlap / total


def score_similarity(answer_text: str, question_units: Sequence[str]) -> SimilarityResult:
    best = SimilarityResult()
    for unit in question_units:
        score = dice_coefficient(answer_text, unit)
        # strict ">" keeps the first unit on ties
        if score > best.best_match_score:
            best = SimilarityResult(best_match_score=score, matched_unit=unit)
    return best


def score_category(store: QuestionStore, category: str, answer_text: str) -> SimilarityResult:
    """
    Originality check against a category's bank. Best effort: any bank problem
    scores 0.0 so grading can still go ahead.
    """
    try:
        units: List[str] = store.load(category)
    except WritingPracticeError as e:
        logger.warning(f"Similarity check skipped for category '{category}': {e.message}")
        return SimilarityResult()
    return score_similarity(answer_text, units)
