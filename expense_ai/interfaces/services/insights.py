from abc import ABC, abstractmethod
from typing import List

from expense_ai.domains.expenses import AIInsight, ExpenseRecord


class InsightService(ABC):
    """Interface for AI-backed expense analysis."""

    @abstractmethod
    async def generate_expense_insights(
        self, expenses: List[ExpenseRecord]
    ) -> List[AIInsight]:
        """Generate financial insights from an expense history."""
        pass

    @abstractmethod
    async def categorize_expense(self, description: str) -> str:
        """Classify an expense description into a known category."""
        pass

    @abstractmethod
    async def generate_ai_answer(
        self, question: str, expenses: List[ExpenseRecord]
    ) -> str:
        """Answer a free-text question about an expense history."""
        pass
