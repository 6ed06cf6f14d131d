"""
Simplified client interface for interacting with the Expense AI system.

This module provides a clean API for the web application to call without
dealing with adapters, repositories or wiring.
"""

import json
import importlib.util
from typing import Any, Dict, List, Optional

from expense_ai.domains.expenses import AIInsight, ExpenseRecord
from expense_ai.domains.users import ApplicationUser
from expense_ai.factories.expense_ai_factory import ExpenseAIFactory
from expense_ai.interfaces.client.client import ExpenseAI as ExpenseAIInterface


def load_config(config_path: str) -> Dict[str, Any]:
    """Load a configuration dict from a JSON file or a Python file defining `config`."""
    with open(config_path, "r") as f:
        if config_path.endswith(".json"):
            return json.load(f)

    # Assume it's a Python file
    spec = importlib.util.spec_from_file_location("config", config_path)
    config_module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(config_module)
    return config_module.config


class ExpenseAI(ExpenseAIInterface):
    """Simplified client interface for the Expense AI system."""

    def __init__(self, config_path: str = None, config: Dict[str, Any] = None):
        """Initialize the system from config file or dictionary.

        Args:
            config_path: Path to configuration file (JSON or Python)
            config: Configuration dictionary
        """
        if config is None and not config_path:
            raise ValueError("Either config or config_path must be provided")

        if config_path:
            config = load_config(config_path)

        self.insight_service = ExpenseAIFactory.create_insight_service(config)
        self.user_service = ExpenseAIFactory.create_user_service(config)

    async def generate_expense_insights(
        self, expenses: List[ExpenseRecord]
    ) -> List[AIInsight]:
        return await self.insight_service.generate_expense_insights(expenses)

    async def categorize_expense(self, description: str) -> str:
        return await self.insight_service.categorize_expense(description)

    async def generate_ai_answer(
        self, question: str, expenses: List[ExpenseRecord]
    ) -> str:
        return await self.insight_service.generate_ai_answer(question, expenses)

    async def check_user(self, session_id: Optional[str]) -> Optional[ApplicationUser]:
        """Return the application user for a session, provisioning it on first sight.

        Args:
            session_id: Identity provider session id of the current request

        Returns:
            The application user, or None when unauthenticated
        """
        if self.user_service is None:
            raise ValueError("User provisioning is not configured (mongo and clerk)")
        return await self.user_service.check_user(session_id)
