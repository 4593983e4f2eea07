"""
LLM-as-Judge scoring for immigration answers.

Asks the chat model to rate five dimensions in [0, 1] and return reasons and
recommendations as strict JSON.

Dimensions:
- legal_accuracy: citations formatted, terminology and requirements correct
- completeness: every part of the question covered
- clarity: understandable for the user
- actionability: concrete next steps
- translation_quality: natural phrasing in the user's language

Dependencies: langchain_core.messages, diaspora_assist.boundary.llm
System role: Model-scored pass of the evaluator
"""

import json
import logging
from dataclasses import dataclass, field

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from diaspora_assist.boundary.llm.chat_model import message_text
from diaspora_assist.models.evaluation import SCORE_WEIGHTS
from diaspora_assist.models.rag import LLMAnswer
from diaspora_assist.observability.log_utils import log_degraded

logger = logging.getLogger(__name__)

JUDGE_TEMPERATURE = 0.1
JUDGE_MAX_OUTPUT_TOKENS = 500

JUDGE_SYSTEM_PROMPT = (
    "You are an expert evaluator of immigration assistance responses. "
    "Provide objective, detailed evaluations in the requested JSON format."
)

# Used when the model omits a score or returns 0.
DEFAULT_JUDGE_SCORE = 0.5
DEFAULT_JUDGE_TRANSLATION_SCORE = 1.0


def _as_text_list(value) -> list[str]:
    """Accept a list of findings or a single string."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


@dataclass
class JudgeScores:
    """Model-reported scores (0-1). Empty when the reply could not be parsed."""

    scores: dict[str, float] = field(default_factory=dict)
    reasons: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.scores


class LLMJudge:
    """LLM-as-Judge evaluator.

    Usage:
        judge = LLMJudge(model)
        scores = await judge.evaluate(answer, "What visa do I need?", "French")
    """

    def __init__(self, model: BaseChatModel) -> None:
        """
        Args:
            model: Chat model configured with JUDGE_TEMPERATURE and
                JUDGE_MAX_OUTPUT_TOKENS
        """
        self.model = model

    async def evaluate(
        self,
        answer: LLMAnswer,
        original_question: str,
        user_language: str = "English",
    ) -> JudgeScores:
        """Score an answer.

        Args:
            answer: Generated answer with its sources
            original_question: Question as the user asked it
            user_language: Language the user asked in

        Returns:
            JudgeScores: Parsed scores, empty if the reply was not valid JSON

        Raises:
            Exception: Whatever the model call raises
        """
        messages = [
            SystemMessage(content=JUDGE_SYSTEM_PROMPT),
            HumanMessage(
                content=self._build_evaluation_prompt(answer, original_question, user_language)
            ),
        ]
        response = await self.model.ainvoke(messages)
        return self._parse_response(message_text(response.content))

    def _build_evaluation_prompt(
        self,
        answer: LLMAnswer,
        original_question: str,
        user_language: str,
    ) -> str:
        """Build evaluation prompt for the LLM judge."""
        return f"""Evaluate this immigration assistant response on a scale of 0.0 to 1.0 for each criterion:

ORIGINAL QUESTION: "{original_question}"
USER LANGUAGE: {user_language}
RESPONSE: "{answer.text}"
SOURCES: {", ".join(answer.sources)}

Rate each aspect (0.0 = poor, 1.0 = excellent):

1. LEGAL ACCURACY (0.0-1.0):
   - Are citations properly formatted?
   - Is immigration terminology used correctly?
   - Are legal requirements accurately stated?

2. COMPLETENESS (0.0-1.0):
   - Does it address all parts of the question?
   - Are key requirements/steps covered?
   - Is important context provided?

3. CLARITY (0.0-1.0):
   - Is language clear and understandable?
   - Is it appropriate for the user's context?
   - Are complex terms explained?

4. ACTIONABILITY (0.0-1.0):
   - Does it provide specific next steps?
   - Are concrete actions suggested?
   - Is guidance practical and implementable?

5. TRANSLATION QUALITY (0.0-1.0):
   - If not English: Is the language natural and accurate?
   - Are technical terms properly translated?
   - Is the tone appropriate for the target language?

Respond in JSON format ONLY (no markdown, no extra text):
{{
    "legal_accuracy": 0.0,
    "completeness": 0.0,
    "clarity": 0.0,
    "actionability": 0.0,
    "translation_quality": 0.0,
    "reasons": ["reason1", "reason2"],
    "recommendations": ["rec1", "rec2"]
}}"""

    def _parse_response(self, response_text: str) -> JudgeScores:
        """Parse LLM response JSON.

        Handles markdown code fences around the object.
        """
        try:
            text = response_text
            if "```json" in text:
                text = text.split("```json")[1].split("```")[0]
            elif "```" in text:
                text = text.split("```")[1].split("```")[0]

            data = json.loads(text.strip())
            if not isinstance(data, dict):
                raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

            scores = {}
            for name in SCORE_WEIGHTS:
                default = (
                    DEFAULT_JUDGE_TRANSLATION_SCORE
                    if name == "translation_quality"
                    else DEFAULT_JUDGE_SCORE
                )
                value = float(data.get(name) or default)
                # Clamp scores to 0-1 range
                scores[name] = min(1.0, max(0.0, value))

            return JudgeScores(
                scores=scores,
                reasons=_as_text_list(data.get("reasons")),
                recommendations=_as_text_list(data.get("recommendations")),
            )

        except (json.JSONDecodeError, ValueError, TypeError, IndexError) as e:
            log_degraded(
                logger,
                "llm_judge",
                "no model scores",
                exc=e,
                raw_preview=response_text[:200],
            )
            return JudgeScores()
