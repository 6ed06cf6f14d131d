from abc import ABC, abstractmethod
from typing import Optional

from expense_ai.domains.users import IdentityUser


class IdentityProvider(ABC):
    """Interface for authentication / session providers."""

    @abstractmethod
    async def current_user(self, session_id: Optional[str]) -> Optional[IdentityUser]:
        """Return the user behind a session, or None when unauthenticated."""
        pass
