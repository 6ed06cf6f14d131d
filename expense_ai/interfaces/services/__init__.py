from expense_ai.interfaces.services.insights import InsightService
from expense_ai.interfaces.services.users import UserService

__all__ = ["InsightService", "UserService"]
