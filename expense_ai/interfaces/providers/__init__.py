from expense_ai.interfaces.providers.data_storage import DataStorageProvider
from expense_ai.interfaces.providers.identity import IdentityProvider
from expense_ai.interfaces.providers.llm import LLMProvider

__all__ = ["DataStorageProvider", "IdentityProvider", "LLMProvider"]
