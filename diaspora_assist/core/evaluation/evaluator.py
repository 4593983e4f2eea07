"""
Answer evaluator.

Runs the heuristic checks and the LLM judge and merges them: each dimension
takes the judge's score when it has one, otherwise the heuristic score, and
the overall score is the weighted sum over SCORE_WEIGHTS. If the judge call
itself fails the heuristic result is returned unchanged.

Dependencies: diaspora_assist.core.evaluation, diaspora_assist.models
System role: Automatic quality score for every answer
"""

import logging

from diaspora_assist.core.evaluation.heuristics import heuristic_evaluation
from diaspora_assist.core.evaluation.llm_judge import JudgeScores, LLMJudge
from diaspora_assist.models.evaluation import Evaluation, weighted_overall
from diaspora_assist.models.rag import LLMAnswer
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)


def combine_evaluations(heuristic: Evaluation, judged: JudgeScores) -> Evaluation:
    """
    Merge heuristic and judge results.

    Args:
        heuristic: Result of heuristic_evaluation
        judged: Result of LLMJudge.evaluate

    Returns:
        Evaluation: Merged scores with mode="combined"
    """
    base = heuristic.dimension_scores()
    merged = {name: judged.scores.get(name) or base[name] for name in base}

    return Evaluation(
        overall_score=min(1.0, max(0.0, weighted_overall(merged))),
        **merged,
        reasons=[*heuristic.reasons, *judged.reasons],
        recommendations=[*heuristic.recommendations, *judged.recommendations],
        mode="combined",
    )


class Evaluator:
    """Score generated answers."""

    def __init__(self, judge: LLMJudge, min_length: int = 50, max_length: int = 2000) -> None:
        self._judge = judge
        self._min_length = min_length
        self._max_length = max_length

    async def evaluate(
        self,
        answer: LLMAnswer,
        original_question: str,
        user_language: str = "English",
    ) -> Evaluation:
        """
        Evaluate an answer.

        Args:
            answer: Answer to score (English text with its sources)
            original_question: Question as the user asked it
            user_language: Language the user asked in

        Returns:
            Evaluation: Combined result, or the heuristic result with
                mode="heuristic" when the judge call fails
        """
        heuristic = heuristic_evaluation(answer, self._min_length, self._max_length)

        try:
            judged = await self._judge.evaluate(answer, original_question, user_language)
        except Exception as e:
            log_degraded(
                logger,
                "evaluator",
                "heuristic evaluation",
                exc=e,
                overall_score=heuristic.overall_score,
            )
            return heuristic

        evaluation = combine_evaluations(heuristic, judged)
        logger.info(
            f"{__name__}:evaluate - overall_score={evaluation.overall_score:.3f} mode={evaluation.mode}"
        )
        return evaluation
