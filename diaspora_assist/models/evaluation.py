"""
Evaluation domain model.

Quality scores for a generated answer, produced by the evaluator and folded
into the feedback log.

Dependencies: pydantic
System role: Answer quality data structure
"""

from typing import Literal

from pydantic import BaseModel, Field

# Weights must sum to 1.0; update together with the score dimensions.
SCORE_WEIGHTS: dict[str, float] = {
    "legal_accuracy": 0.30,
    "completeness": 0.25,
    "clarity": 0.20,
    "actionability": 0.15,
    "translation_quality": 0.10,
}


class Evaluation(BaseModel):
    """Five sub-scores, a weighted overall score and free-text findings."""

    overall_score: float = Field(ge=0.0, le=1.0)
    legal_accuracy: float = Field(ge=0.0, le=1.0)
    completeness: float = Field(ge=0.0, le=1.0)
    clarity: float = Field(ge=0.0, le=1.0)
    actionability: float = Field(ge=0.0, le=1.0)
    translation_quality: float = Field(ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    mode: Literal["combined", "heuristic"] = Field(
        default="heuristic",
        description="'heuristic' when the model-scored pass was unavailable",
    )

    def dimension_scores(self) -> dict[str, float]:
        """Return the five weighted dimensions keyed like SCORE_WEIGHTS."""
        return {name: getattr(self, name) for name in SCORE_WEIGHTS}


def weighted_overall(scores: dict[str, float]) -> float:
    """
    Weighted sum of the five dimensions.

    Args:
        scores: Mapping with every key of SCORE_WEIGHTS

    Returns:
        float: Overall score in [0, 1] when every input is in [0, 1]
    """
    return sum(scores[name] * weight for name, weight in SCORE_WEIGHTS.items())
