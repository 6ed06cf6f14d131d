from abc import ABC, abstractmethod
from typing import Optional

from expense_ai.domains.users import ApplicationUser


class UserRepository(ABC):
    """Interface for application user storage."""

    @abstractmethod
    def get_by_external_id(self, external_id: str) -> Optional[ApplicationUser]:
        """Find a user by identity provider id."""
        pass

    @abstractmethod
    def insert_or_get(self, user: ApplicationUser) -> ApplicationUser:
        """Store the user unless one with the same external id exists; return the stored user."""
        pass
