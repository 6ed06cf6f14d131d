"""
MongoDB adapter for the Expense AI system.

This adapter implements the DataStorageProvider interface for MongoDB.
"""
from typing import Dict, List, Tuple, Optional

from pymongo import MongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError

from expense_ai.interfaces.providers.data_storage import DataStorageProvider


class MongoDBAdapter(DataStorageProvider):
    """MongoDB implementation of DataStorageProvider."""

    def __init__(self, connection_string: str, database_name: str):
        # Datetimes come back as UTC-aware, matching what the domain models write
        self.client = MongoClient(connection_string, tz_aware=True)
        self.db = self.client[database_name]

    def create_collection(self, name: str) -> None:
        if name not in self.db.list_collection_names():
            self.db.create_collection(name)

    def find_one(self, collection: str, query: Dict) -> Optional[Dict]:
        return self.db[collection].find_one(query)

    def find_one_or_insert(self, collection: str, query: Dict, document: Dict) -> Dict:
        # Fields already pinned by the query are filled in by the upsert itself
        on_insert = {k: v for k, v in document.items() if k not in query}
        try:
            return self.db[collection].find_one_and_update(
                query,
                {"$setOnInsert": on_insert},
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            # A concurrent upsert inserted the same key first
            return self.db[collection].find_one(query)

    def create_index(self, collection: str, keys: List[Tuple], **kwargs) -> None:
        self.db[collection].create_index(keys, **kwargs)
