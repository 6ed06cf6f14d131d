"""
Factory for creating and wiring components of the Expense AI system.

This module handles the creation and dependency injection for all
services and components used in the system.
"""

import logging
import os
from typing import Any, Dict, Optional

# Service imports
from expense_ai.services.insights import InsightService
from expense_ai.services.users import UserService

# Repository imports
from expense_ai.repositories.user import MongoUserRepository

# Adapter imports
from expense_ai.adapters.gemini_adapter import GeminiAdapter
from expense_ai.adapters.mongodb_adapter import MongoDBAdapter
from expense_ai.adapters.clerk_adapter import ClerkAdapter

# Setup logger for this module
logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "GEMINI_API_KEY"


class ExpenseAIFactory:
    """Factory for creating and wiring components of the Expense AI system."""

    @staticmethod
    def create_llm_adapter(config: Dict[str, Any]) -> GeminiAdapter:
        """Create the generative model adapter.

        The API key comes from the "gemini" section, falling back to the
        GEMINI_API_KEY environment variable and finally to an empty key.
        """
        gemini_config = config.get("gemini", {})
        api_key = gemini_config.get("api_key") or os.environ.get(API_KEY_ENV_VAR, "")
        model = gemini_config.get("model")
        if model:
            logger.info(f"Using Gemini as LLM provider with model: {model}")
        else:
            logger.info("Using Gemini as LLM provider")

        logfire_api_key = None
        if "logfire" in config:
            if "api_key" not in config["logfire"]:
                raise ValueError("Pydantic Logfire API key is required.")
            logfire_api_key = config["logfire"]["api_key"]

        return GeminiAdapter(
            api_key=api_key,
            model=model,
            base_url=gemini_config.get("base_url"),
            logfire_api_key=logfire_api_key,
        )

    @staticmethod
    def create_insight_service(config: Dict[str, Any]) -> InsightService:
        """Create the insight service from configuration."""
        llm_adapter = ExpenseAIFactory.create_llm_adapter(config)
        return InsightService(llm_provider=llm_adapter)

    @staticmethod
    def create_user_service(config: Dict[str, Any]) -> Optional[UserService]:
        """Create the user service, or None when provisioning is not configured.

        Args:
            config: Configuration dictionary

        Returns:
            Configured UserService instance or None
        """
        if "mongo" not in config and "clerk" not in config:
            logger.info("User provisioning disabled: no mongo or clerk config")
            return None
        if "mongo" not in config:
            raise ValueError("MongoDB config is required for user provisioning.")
        if "clerk" not in config:
            raise ValueError("Clerk config is required for user provisioning.")

        if "connection_string" not in config["mongo"]:
            raise ValueError("MongoDB connection string is required.")
        if "database" not in config["mongo"]:
            raise ValueError("MongoDB database name is required.")
        if "secret_key" not in config["clerk"]:
            raise ValueError("Clerk secret key is required.")

        db_adapter = MongoDBAdapter(
            connection_string=config["mongo"]["connection_string"],
            database_name=config["mongo"]["database"],
        )
        identity_adapter = ClerkAdapter(
            secret_key=config["clerk"]["secret_key"],
            api_url=config["clerk"].get("api_url"),
        )

        return UserService(
            identity_provider=identity_adapter,
            user_repository=MongoUserRepository(db_adapter),
        )
