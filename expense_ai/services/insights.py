"""
Insight service implementation.

This service turns expense histories into financial insights, expense
categories and free-text answers using a generative language model.
"""
import json
import logging
import time
from typing import Any, Dict, List, Optional

from expense_ai.domains.enums import (
    ExpenseCategory,
    GenerationErrorKind,
    InsightType,
)
from expense_ai.domains.errors import GenerationError
from expense_ai.domains.expenses import AIInsight, ExpenseRecord
from expense_ai.interfaces.providers.llm import LLMProvider
from expense_ai.interfaces.services.insights import (
    InsightService as InsightServiceInterface,
)

# Setup logger for this module
logger = logging.getLogger(__name__)

INSIGHTS_TEMPERATURE = 0.7

DEFAULT_INSIGHT_TITLE = "AI Insight"
DEFAULT_INSIGHT_MESSAGE = "Analysis complete"
DEFAULT_INSIGHT_CONFIDENCE = 0.8

FALLBACK_INSIGHT = AIInsight(
    id="fallback-1",
    type=InsightType.INFO,
    title="AI Analysis Unavailable",
    message="Unable to generate personalized insights at this time. Please try again later.",
    action="Refresh insights",
    confidence=0.5,
)

FALLBACK_ANSWER = (
    "I'm unable to provide a detailed answer at the moment. "
    "Please try refreshing the insights or check your connection."
)

VALID_CATEGORIES = [category.value for category in ExpenseCategory]
INSIGHT_TYPES = {insight_type.value for insight_type in InsightType}


def summarize_expenses(expenses: List[ExpenseRecord]) -> str:
    """Render the model-facing view of an expense history as indented JSON."""
    return json.dumps([expense.summary() for expense in expenses], indent=2)


class InsightService(InsightServiceInterface):
    """Service for AI-backed expense analysis."""

    def __init__(self, llm_provider: LLMProvider, model: Optional[str] = None):
        """Initialize the insight service.

        Args:
            llm_provider: Provider for language model interactions
            model: Optional model name overriding the provider default
        """
        self.llm_provider = llm_provider
        self.model = model

    async def generate_expense_insights(
        self, expenses: List[ExpenseRecord]
    ) -> List[AIInsight]:
        """Generate 3-4 actionable insights from an expense history.

        Args:
            expenses: Expenses to analyze

        Returns:
            Normalized insights, or a single fallback insight on any failure
        """
        prompt = f"""You are a financial advisor AI. Analyze the following expense data and provide 3-4 actionable financial insights.
    Return a JSON array of insights with this exact structure:
    [{{
      "type": "warning|info|success|tip",
      "title": "Brief title",
      "message": "Detailed insight message with specific numbers when possible",
      "action": "Actionable suggestion",
      "confidence": 0.8
    }}]

    Focus on:
    1. Spending patterns (day of week, categories)
    2. Budget alerts (high spending areas)
    3. Money-saving opportunities
    4. Positive reinforcement for good habits

    Expense Data:
    {summarize_expenses(expenses)}
    """

        try:
            response_text = await self.llm_provider.generate_text(
                prompt=prompt,
                model=self.model,
                response_mime_type="application/json",
                temperature=INSIGHTS_TEMPERATURE,
            )
            raw_insights = self._parse_insights(response_text)

            stamp = int(time.time() * 1000)
            return [
                self._normalize_insight(raw, f"ai-{stamp}-{index}")
                for index, raw in enumerate(raw_insights)
            ]
        except GenerationError as e:
            logger.error(f"Error generating AI insights ({e.kind.value}): {e}")
        except Exception as e:
            logger.exception(f"Unexpected error generating AI insights: {e}")

        return [FALLBACK_INSIGHT.model_copy()]

    async def categorize_expense(self, description: str) -> str:
        """Classify an expense description into one of the known categories.

        Args:
            description: Free-text expense description

        Returns:
            The category name, "Other" unless the model answered with an exact match
        """
        prompt = (
            "You are an expense categorization AI. Categorize the following expense "
            f"into one of these categories: {', '.join(VALID_CATEGORIES)}. "
            "Respond with only the single category name.\n\n"
            f'    Expense: "{description}"'
        )

        try:
            response_text = await self.llm_provider.generate_text(
                prompt=prompt, model=self.model
            )
        except GenerationError as e:
            logger.error(f"Error categorizing expense ({e.kind.value}): {e}")
            return ExpenseCategory.OTHER.value
        except Exception as e:
            logger.exception(f"Unexpected error categorizing expense: {e}")
            return ExpenseCategory.OTHER.value

        category = (response_text or "").strip()
        if category in VALID_CATEGORIES:
            return category

        logger.debug(f"Model returned unknown category {category!r}, using Other")
        return ExpenseCategory.OTHER.value

    async def generate_ai_answer(
        self, question: str, expenses: List[ExpenseRecord]
    ) -> str:
        """Answer a question about an expense history in 2-3 sentences.

        Args:
            question: The user's question
            expenses: Expenses used as context

        Returns:
            The trimmed answer, or a fixed apology on failure
        """
        prompt = f"""You are a helpful financial advisor AI. Based on the following expense data, provide a concise but thorough answer (2-3 sentences) to this question: "{question}"

    Use concrete data from the expenses when possible and offer actionable advice. Return only the answer text.

    Expense Data:
    {summarize_expenses(expenses)}"""

        try:
            response_text = await self.llm_provider.generate_text(
                prompt=prompt, model=self.model
            )
            answer = (response_text or "").strip()
            if not answer:
                raise GenerationError(
                    GenerationErrorKind.EMPTY_RESPONSE, "No response from AI"
                )
            return answer
        except GenerationError as e:
            logger.error(f"Error generating AI answer ({e.kind.value}): {e}")
        except Exception as e:
            logger.exception(f"Unexpected error generating AI answer: {e}")

        return FALLBACK_ANSWER

    def _parse_insights(self, response_text: str) -> List[Any]:
        if not response_text or not response_text.strip():
            raise GenerationError(
                GenerationErrorKind.EMPTY_RESPONSE, "No response from AI"
            )

        try:
            insights = json.loads(response_text)
        except json.JSONDecodeError as e:
            raise GenerationError(
                GenerationErrorKind.PARSE, f"Response is not valid JSON: {e}"
            ) from e

        if not isinstance(insights, list):
            raise GenerationError(
                GenerationErrorKind.PARSE,
                f"Expected a JSON array, got {type(insights).__name__}",
            )
        if not insights:
            raise GenerationError(
                GenerationErrorKind.EMPTY_RESPONSE, "Response contained no insights"
            )
        return insights

    def _normalize_insight(self, raw: Any, insight_id: str) -> AIInsight:
        data: Dict[str, Any] = raw if isinstance(raw, dict) else {}

        insight_type = data.get("type")
        if not isinstance(insight_type, str) or insight_type not in INSIGHT_TYPES:
            insight_type = InsightType.INFO

        title = data.get("title")
        message = data.get("message")
        action = data.get("action")

        confidence = data.get("confidence")
        if (
            isinstance(confidence, bool)
            or not isinstance(confidence, (int, float))
            or not 0 < confidence <= 1
        ):
            confidence = DEFAULT_INSIGHT_CONFIDENCE

        return AIInsight(
            id=insight_id,
            type=insight_type,
            title=title if isinstance(title, str) and title else DEFAULT_INSIGHT_TITLE,
            message=(
                message
                if isinstance(message, str) and message
                else DEFAULT_INSIGHT_MESSAGE
            ),
            action=action if isinstance(action, str) and action else None,
            confidence=float(confidence),
        )
