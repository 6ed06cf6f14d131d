"""
User service implementation.

This service provisions application users lazily from the identity
provider's current session.
"""
import logging
from typing import Optional

from expense_ai.domains.users import ApplicationUser
from expense_ai.interfaces.providers.identity import IdentityProvider
from expense_ai.interfaces.repositories.user import UserRepository
from expense_ai.interfaces.services.users import UserService as UserServiceInterface

logger = logging.getLogger(__name__)


class UserService(UserServiceInterface):
    """Service for find-or-create of application users."""

    def __init__(
        self, identity_provider: IdentityProvider, user_repository: UserRepository
    ):
        self.identity_provider = identity_provider
        self.user_repository = user_repository

    async def check_user(self, session_id: Optional[str]) -> Optional[ApplicationUser]:
        identity = await self.identity_provider.current_user(session_id)
        if identity is None:
            logger.debug("No authenticated session")
            return None

        # Storage errors propagate to the caller
        user = self.user_repository.insert_or_get(
            ApplicationUser.from_identity(identity)
        )
        logger.debug(f"Resolved application user {user.id} for {identity.id}")
        return user
