"""
Tests for user repository implementations.

This module contains unit tests for MongoUserRepository.
"""
from datetime import datetime, timedelta, timezone

import pytest
import mongomock
from unittest.mock import Mock

from expense_ai.adapters.mongodb_adapter import MongoDBAdapter
from expense_ai.domains.users import ApplicationUser
from expense_ai.repositories.user import MongoUserRepository


@pytest.fixture
def mock_db_adapter():
    """Create a mock database adapter."""
    adapter = Mock()
    adapter.create_collection = Mock()
    adapter.create_index = Mock()
    adapter.find_one = Mock()
    adapter.find_one_or_insert = Mock()
    return adapter


@pytest.fixture
def mongomock_adapter():
    """MongoDBAdapter backed by mongomock."""
    client = mongomock.MongoClient()
    adapter = MongoDBAdapter(
        connection_string="mongodb://localhost:27017/", database_name="test_db"
    )
    adapter.client = client
    adapter.db = client["test_db"]
    return adapter


@pytest.fixture
def sample_user():
    return ApplicationUser(
        external_id="user_2abc",
        email="ada@example.com",
        name="Ada Lovelace",
        image_url="https://img.example.com/ada.png",
    )


class TestMongoUserRepository:
    """Tests for the MongoUserRepository implementation."""

    def test_init(self, mock_db_adapter):
        """Test repository initialization."""
        MongoUserRepository(mock_db_adapter)

        mock_db_adapter.create_collection.assert_called_once_with("users")
        mock_db_adapter.create_index.assert_called_once_with(
            "users", [("external_id", 1)], unique=True
        )

    def test_get_by_external_id_missing(self, mock_db_adapter):
        """Test lookup of an unknown identity."""
        mock_db_adapter.find_one.return_value = None
        repo = MongoUserRepository(mock_db_adapter)

        assert repo.get_by_external_id("user_missing") is None
        mock_db_adapter.find_one.assert_called_once_with(
            "users", {"external_id": "user_missing"}
        )

    def test_insert_or_get_query(self, mock_db_adapter, sample_user):
        """Test the upsert is keyed on external_id and carries the candidate fields."""
        def echo(collection, query, document):
            return dict(document, _id="doc-1")

        mock_db_adapter.find_one_or_insert.side_effect = echo
        repo = MongoUserRepository(mock_db_adapter)

        stored = repo.insert_or_get(sample_user)

        collection, query, document = mock_db_adapter.find_one_or_insert.call_args.args
        assert collection == "users"
        assert query == {"external_id": "user_2abc"}
        assert document["email"] == "ada@example.com"
        assert "id" not in document
        assert stored.id == "doc-1"
        assert stored.external_id == "user_2abc"

    def test_insert_or_get_creates(self, mongomock_adapter, sample_user):
        """Test a first sign-in creates the record."""
        repo = MongoUserRepository(mongomock_adapter)

        stored = repo.insert_or_get(sample_user)

        assert stored.id
        assert stored.external_id == "user_2abc"
        assert stored.email == "ada@example.com"
        assert stored.name == "Ada Lovelace"
        assert stored.image_url == "https://img.example.com/ada.png"
        assert repo.get_by_external_id("user_2abc").id == stored.id

    def test_insert_or_get_returns_existing(self, mongomock_adapter, sample_user):
        """Test a repeat sign-in returns the first record unchanged."""
        repo = MongoUserRepository(mongomock_adapter)
        first = repo.insert_or_get(sample_user)

        changed = sample_user.model_copy(
            update={"email": "new@example.com", "name": "Ada King"}
        )
        second = repo.insert_or_get(changed)

        assert second.id == first.id
        assert second.email == "ada@example.com"
        assert second.name == "Ada Lovelace"
        assert mongomock_adapter.db["users"].count_documents({}) == 1

    def test_distinct_identities_get_distinct_records(self, mongomock_adapter, sample_user):
        """Test each external id gets its own record."""
        repo = MongoUserRepository(mongomock_adapter)

        first = repo.insert_or_get(sample_user)
        other = repo.insert_or_get(
            sample_user.model_copy(update={"external_id": "user_other"})
        )

        assert first.id != other.id
        assert mongomock_adapter.db["users"].count_documents({}) == 2

    def test_naive_created_at_is_read_as_utc(self, mock_db_adapter):
        """Test a stored naive timestamp comes back UTC-aware."""
        mock_db_adapter.find_one.return_value = {
            "_id": "doc-1",
            "external_id": "user_2abc",
            "email": "ada@example.com",
            "created_at": datetime(2024, 3, 1, 12, 30),
        }
        repo = MongoUserRepository(mock_db_adapter)

        stored = repo.get_by_external_id("user_2abc")

        assert stored.created_at == datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)

    def test_stored_created_at_compares_with_fresh_user(
        self, mongomock_adapter, sample_user
    ):
        """Test a read-back record can be compared with a newly built one."""
        repo = MongoUserRepository(mongomock_adapter)

        stored = repo.insert_or_get(sample_user)

        assert stored.created_at.tzinfo is not None
        assert abs(stored.created_at - sample_user.created_at) < timedelta(seconds=1)
        assert stored.created_at <= datetime.now(timezone.utc)
