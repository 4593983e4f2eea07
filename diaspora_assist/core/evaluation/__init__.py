"""
Answer evaluation: heuristic checks, LLM judge and their merge.
"""

from diaspora_assist.core.evaluation.evaluator import Evaluator, combine_evaluations
from diaspora_assist.core.evaluation.heuristics import heuristic_evaluation
from diaspora_assist.core.evaluation.llm_judge import JudgeScores, LLMJudge

__all__ = ["Evaluator", "combine_evaluations", "heuristic_evaluation", "JudgeScores", "LLMJudge"]
