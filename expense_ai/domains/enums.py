"""
Common enumerations used across the Expense AI system.
"""
from enum import Enum


class InsightType(str, Enum):
    """Kind of financial insight shown to the user."""
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    TIP = "tip"


class ExpenseCategory(str, Enum):
    """Categories an expense can be classified into."""
    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    SHOPPING = "Shopping"
    BILLS = "Bills"
    HEALTHCARE = "Healthcare"
    OTHER = "Other"


class GenerationErrorKind(str, Enum):
    """Why a call to the generative model failed."""
    CREDENTIAL_MISSING = "credential_missing"
    TRANSPORT = "transport"
    PARSE = "parse"
    EMPTY_RESPONSE = "empty_response"
