"""
MongoDB implementation of the user repository.

This repository stores application users keyed by their identity provider id.
"""
from datetime import datetime, timezone
from typing import Dict, Optional

from expense_ai.domains.users import ApplicationUser
from expense_ai.interfaces.providers.data_storage import DataStorageProvider
from expense_ai.interfaces.repositories.user import UserRepository


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    def __init__(self, db_adapter: DataStorageProvider):
        """Initialize the user repository.

        Args:
            db_adapter: MongoDB adapter
        """
        self.db = db_adapter
        self.collection = "users"

        # Ensure collection exists
        self.db.create_collection(self.collection)

        # external_id must be unique for insert_or_get to be atomic
        self.db.create_index(self.collection, [("external_id", 1)], unique=True)

    def get_by_external_id(self, external_id: str) -> Optional[ApplicationUser]:
        doc = self.db.find_one(self.collection, {"external_id": external_id})
        return self._to_user(doc) if doc else None

    def insert_or_get(self, user: ApplicationUser) -> ApplicationUser:
        """Store a user unless one already exists for the same external id.

        Args:
            user: Candidate user built from the current identity

        Returns:
            The stored user, untouched if it already existed
        """
        doc = self.db.find_one_or_insert(
            self.collection,
            {"external_id": user.external_id},
            user.model_dump(exclude={"id"}),
        )
        return self._to_user(doc)

    def _to_user(self, doc: Dict) -> ApplicationUser:
        data = dict(doc)
        data["id"] = str(data.pop("_id", ""))
        created_at = data.get("created_at")
        # BSON dates are UTC; clients without tz_aware hand them back naive
        if isinstance(created_at, datetime) and created_at.tzinfo is None:
            data["created_at"] = created_at.replace(tzinfo=timezone.utc)
        return ApplicationUser(**data)
