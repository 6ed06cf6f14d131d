"""
Clerk adapter for the Expense AI system.

This adapter implements the IdentityProvider interface on top of the
Clerk Backend API.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from expense_ai.domains.users import EmailAddress, IdentityUser
from expense_ai.interfaces.providers.identity import IdentityProvider

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.clerk.com/v1"
ACTIVE_SESSION_STATUS = "active"


class ClerkAdapter(IdentityProvider):
    """Clerk implementation of IdentityProvider."""

    def __init__(
        self,
        secret_key: str,
        api_url: Optional[str] = None,
        timeout_seconds: float = 10.0,
    ):
        self.secret_key = secret_key
        self.api_url = (api_url or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout_seconds

    async def current_user(self, session_id: Optional[str]) -> Optional[IdentityUser]:
        """Resolve a session id to its signed-in user.

        Args:
            session_id: Clerk session id taken from the current request

        Returns:
            IdentityUser for an active session, None otherwise
        """
        if not session_id:
            return None

        headers = {"Authorization": f"Bearer {self.secret_key}"}
        async with httpx.AsyncClient(timeout=self.timeout, headers=headers) as client:
            session = await self._get(client, f"/sessions/{session_id}")
            if not session or session.get("status") != ACTIVE_SESSION_STATUS:
                logger.debug(f"Session {session_id} is missing or not active")
                return None

            user_id = session.get("user_id")
            if not user_id:
                logger.warning(f"Session {session_id} carries no user id")
                return None

            user = await self._get(client, f"/users/{user_id}")
            if not user:
                logger.warning(f"Session {session_id} points at unknown user {user_id}")
                return None

        return self._parse_user(user)

    async def _get(self, client: httpx.AsyncClient, path: str) -> Optional[Dict[str, Any]]:
        response = await client.get(f"{self.api_url}{path}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()

    def _parse_user(self, data: Dict[str, Any]) -> IdentityUser:
        return IdentityUser(
            id=data["id"],
            email_addresses=[
                EmailAddress(id=e.get("id"), email_address=e["email_address"])
                for e in data.get("email_addresses") or []
                if e.get("email_address")
            ],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            image_url=data.get("image_url") or "",
        )
