from abc import ABC, abstractmethod
from typing import List, Optional

from expense_ai.domains.expenses import AIInsight, ExpenseRecord
from expense_ai.domains.users import ApplicationUser


class ExpenseAI(ABC):
    """Interface for the Expense AI client."""

    @abstractmethod
    async def generate_expense_insights(
        self, expenses: List[ExpenseRecord]
    ) -> List[AIInsight]:
        """Generate financial insights from an expense history."""
        pass

    @abstractmethod
    async def categorize_expense(self, description: str) -> str:
        """Classify an expense description."""
        pass

    @abstractmethod
    async def generate_ai_answer(
        self, question: str, expenses: List[ExpenseRecord]
    ) -> str:
        """Answer a question about an expense history."""
        pass

    @abstractmethod
    async def check_user(self, session_id: Optional[str]) -> Optional[ApplicationUser]:
        """Return (provisioning if needed) the user behind a session."""
        pass
