"""
Heuristic answer checks.

Length bounds and citation presence/format, computed without any external
call. Dimensions these checks cannot judge get fixed defaults.
"""

from diaspora_assist.core.rag.prompt_builder import CITATION_PATTERN
from diaspora_assist.models.evaluation import Evaluation
from diaspora_assist.models.rag import LLMAnswer

DEFAULT_COMPLETENESS = 0.8
DEFAULT_CLARITY = 0.8
DEFAULT_ACTIONABILITY = 0.7
DEFAULT_TRANSLATION_QUALITY = 1.0

SHORT_PENALTY = 0.3
LONG_PENALTY = 0.2
NO_SOURCES_OVERALL_PENALTY = 0.4
NO_SOURCES_ACCURACY_PENALTY = 0.5
CITATION_FORMAT_PENALTY = 0.3


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def heuristic_evaluation(
    answer: LLMAnswer,
    min_length: int = 50,
    max_length: int = 2000,
) -> Evaluation:
    """
    Score an answer with cheap structural checks.

    Args:
        answer: Generated answer with its sources
        min_length: Answers shorter than this are penalized
        max_length: Answers longer than this are penalized

    Returns:
        Evaluation: Heuristic scores with mode="heuristic"
    """
    overall = 1.0
    legal_accuracy = 1.0
    reasons: list[str] = []
    recommendations: list[str] = []

    if len(answer.text) < min_length:
        overall -= SHORT_PENALTY
        reasons.append("Response too short")
        recommendations.append("Provide more detailed explanation")

    if len(answer.text) > max_length:
        overall -= LONG_PENALTY
        reasons.append("Response too long")
        recommendations.append("Make response more concise")

    if not answer.sources:
        legal_accuracy -= NO_SOURCES_ACCURACY_PENALTY
        overall -= NO_SOURCES_OVERALL_PENALTY
        reasons.append("No sources cited")
        recommendations.append("Include source citations for credibility")
    elif not CITATION_PATTERN.search(answer.text):
        legal_accuracy -= CITATION_FORMAT_PENALTY
        reasons.append("Improper citation format")
        recommendations.append("Use proper citation format: (Source: filename.txt)")

    return Evaluation(
        overall_score=_clamp(overall),
        legal_accuracy=_clamp(legal_accuracy),
        completeness=DEFAULT_COMPLETENESS,
        clarity=DEFAULT_CLARITY,
        actionability=DEFAULT_ACTIONABILITY,
        translation_quality=DEFAULT_TRANSLATION_QUALITY,
        reasons=reasons,
        recommendations=recommendations,
        mode="heuristic",
    )
