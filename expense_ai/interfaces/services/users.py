from abc import ABC, abstractmethod
from typing import Optional

from expense_ai.domains.users import ApplicationUser


class UserService(ABC):
    """Interface for application user provisioning."""

    @abstractmethod
    async def check_user(self, session_id: Optional[str]) -> Optional[ApplicationUser]:
        """Return the application user for the current session, creating it on first sight.

        Args:
            session_id: Identity provider session id of the current request

        Returns:
            The application user, or None when unauthenticated
        """
        pass
