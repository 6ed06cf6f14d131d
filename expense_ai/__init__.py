"""
Expense AI - generative-model insights for expense tracking.

This package provides AI-backed expense insights, categorization and
question answering, plus lazy provisioning of application users from an
identity provider session.
"""

# Client interface (main entry point)
from expense_ai.client.expense_ai import ExpenseAI

# Factory for creating services
from expense_ai.factories.expense_ai_factory import ExpenseAIFactory

# Domain models
from expense_ai.domains.expenses import AIInsight, ExpenseRecord
from expense_ai.domains.users import ApplicationUser, IdentityUser
from expense_ai.domains.enums import ExpenseCategory, GenerationErrorKind, InsightType
from expense_ai.domains.errors import GenerationError

# Package metadata
__all__ = [
    # Main client interfaces
    "ExpenseAI",
    # Factories
    "ExpenseAIFactory",
    # Domain
    "AIInsight",
    "ExpenseRecord",
    "ApplicationUser",
    "IdentityUser",
    "ExpenseCategory",
    "GenerationErrorKind",
    "InsightType",
    "GenerationError",
]
