# writing_practice/core/output_parser.py
"""
Parse, else repair, else give up: turning untrusted grader text into a GradingResult.

Each stage returns None on failure instead of raising, so the caller sees the
whole contract in one place:

    parsed = parse_strict(raw) or repair_braces(raw)
    result = to_grading_result(parsed)   # None -> fall back
"""
import json
import math
from numbers import Real
from typing import Any, Dict, Optional

from writing_practice.schemas.evaluator_schemas import MAX_MARKS, Feedback, GradingResult
from writing_practice.services.fallback_grader import FALLBACK_FEEDBACK

FEEDBACK_FIELDS = ("strengths", "weaknesses", "suggestions")


def _as_object(value: Any) -> Optional[Dict[str, Any]]:
    return value if isinstance(value, dict) else None


def parse_strict(raw: str) -> Optional[Dict[str, Any]]:
    try:
        return _as_object(json.loads(raw))
    except (TypeError, ValueError):
        return None


def repair_braces(raw: str) -> Optional[Dict[str, Any]]:
    """Retry on the span from the first '{' to the last '}' (drops surrounding prose)."""
    if not raw:
        return None
    start, end = raw.find("{"), raw.rfind("}")
    if start == -1 or end <= start:
        return None
    return parse_strict(raw[start:end + 1])


def clamp_marks(value: Real, max_marks: int = MAX_MARKS) -> int:
    bounded = min(max(value, 0), max_marks)
    if isinstance(bounded, int):
        return bounded
    return int(math.floor(bounded + 0.5))


def _coerce_marks(value: Any) -> Optional[Real]:
    # bool is a Real subclass; "true" is not a mark
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    # JSON integers are unbounded; float() would overflow
    if isinstance(value, int):
        return value
    value = float(value)
    if math.isnan(value):
        return None
    return value


def _coerce_feedback(value: Any) -> Feedback:
    given = value if isinstance(value, dict) else {}
    fields = {}
    for name in FEEDBACK_FIELDS:
        text = given.get(name)
        if isinstance(text, str) and text.strip():
            fields[name] = text.strip()
        else:
            fields[name] = getattr(FALLBACK_FEEDBACK, name)
    return Feedback(**fields)


def to_grading_result(obj: Optional[Dict[str, Any]]) -> Optional[GradingResult]:
    """
    Validate a parsed object against the grading contract.

    Requires a numeric `marks`; it is clamped into [0, MAX_MARKS] because the
    upstream grader is not trusted to respect the bound. Upstream `maxMarks`
    is ignored.
    """
    if obj is None:
        return None
    marks = _coerce_marks(obj.get("marks"))
    if marks is None:
        return None
    return GradingResult(
        marks=clamp_marks(marks),
        max_marks=MAX_MARKS,
        feedback=_coerce_feedback(obj.get("feedback")),
    )


def parse_grading_output(raw: str) -> Optional[GradingResult]:
    parsed = parse_strict(raw)
    if parsed is None:
        parsed = repair_braces(raw)
    return to_grading_result(parsed)
