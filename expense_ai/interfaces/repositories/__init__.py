from expense_ai.interfaces.repositories.user import UserRepository

__all__ = ["UserRepository"]
