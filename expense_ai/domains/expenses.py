"""
Expense and insight domain models.

These models define the expense records handed in by callers and the
insights produced from them.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from expense_ai.domains.enums import InsightType


class ExpenseRecord(BaseModel):
    """A single expense owned by the caller."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier")
    amount: float = Field(..., description="Amount spent")
    category: str = Field(..., description="Category label")
    description: str = Field("", description="Free-text description")
    date: str = Field(..., description="ISO date of the expense")

    def summary(self) -> dict:
        """Fields shared with the model when analyzing spending."""
        return self.model_dump(include={"amount", "category", "description", "date"})


class AIInsight(BaseModel):
    """A financial insight generated from an expense history."""
    id: str = Field(..., description="Synthetic identifier")
    type: InsightType = Field(InsightType.INFO, description="Kind of insight")
    title: str = Field(..., description="Brief title")
    message: str = Field(..., description="Detailed insight message")
    action: Optional[str] = Field(None, description="Actionable suggestion")
    confidence: float = Field(0.8, ge=0.0, le=1.0, description="Confidence (0-1)")
