"""
Test: merging grading output with the originality penalty.
"""
import pytest

from writing_practice.schemas.evaluator_schemas import Feedback, GradingResult, SimilarityResult
from writing_practice.services.result_composer import compose, similarity_penalty


def grading(marks):
    return GradingResult(
        marks=marks,
        max_marks=10,
        feedback=Feedback(strengths="Clear.", weaknesses="Brief.", suggestions="Expand."),
    )


class TestCompose:
    def test_below_threshold_passes_through(self):
        response = compose(grading(8), SimilarityResult(best_match_score=0.7), "my answer")
        assert response.marks == 8
        assert response.max_marks == 10
        assert response.feedback.weaknesses == "Brief."
        assert response.user_answer == "my answer"

    def test_penalty_at_ninety_percent(self):
        response = compose(grading(8), SimilarityResult(best_match_score=0.9, matched_unit="q"), "a")
        assert response.marks == 3
        assert response.feedback.weaknesses.startswith("Brief.")
        assert "90%" in response.feedback.weaknesses

    def test_penalty_never_goes_negative(self):
        response = compose(grading(2), SimilarityResult(best_match_score=0.95), "a")
        assert response.marks == 0

    def test_verbatim_copy_scores_zero(self):
        response = compose(grading(10), SimilarityResult(best_match_score=1.0), "a")
        assert response.marks == 0
        assert "100%" in response.feedback.weaknesses

    def test_input_grading_is_not_mutated(self):
        original = grading(8)
        compose(original, SimilarityResult(best_match_score=0.9), "a")
        assert original.feedback.weaknesses == "Brief."
        assert original.marks == 8

    def test_serializes_with_contract_keys(self):
        payload = compose(grading(5), SimilarityResult(), "text").model_dump(by_alias=True)
        assert set(payload) == {"marks", "maxMarks", "feedback", "userAnswer"}
        assert set(payload["feedback"]) == {"strengths", "weaknesses", "suggestions"}


@pytest.mark.parametrize("score, expected", [(0.71, 4), (0.8, 4), (0.9, 5), (1.0, 5)])
def test_similarity_penalty_rounds_half_up(score, expected):
    assert similarity_penalty(score, 10) == expected
