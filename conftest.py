"""
Pytest configuration and fixtures for MCP server tests.

Storage is replaced by InMemoryGateway, which implements the same four
operations as FirestoreClient and records every call it receives.
"""
import os
import time
import pytest
from datetime import datetime, timezone
from typing import Any, Sequence
from unittest.mock import AsyncMock, MagicMock

# Set test environment variables before importing anything
os.environ.setdefault("FIREBASE_CREDENTIALS_JSON", '{"type": "service_account", "project_id": "test"}')
os.environ.setdefault("PLANNER_TIMEZONE", "Asia/Seoul")

from config import Collection, CREATED_AT, UPDATED_AT, TIMESTAMP_FIELDS
from lib.errors import StorageError
from lib.types import Filter


# ========== Response Assertion Helpers ==========

class ResponseAssertions:
    """Helper class for asserting tool envelope structures."""

    @staticmethod
    def assert_success(response: dict, op: str | None = None) -> dict:
        """Assert response is successful and return data.

        Args:
            response: The response dict to check
            op: Optional tool name to verify

        Returns:
            The data dict from the response
        """
        assert response.get("ok") is True, f"Expected success, got: {response}"
        assert isinstance(response.get("text"), str) and response["text"]
        if op:
            assert response.get("op") == op, f"Expected op={op}, got {response.get('op')}"
        return response.get("data", {})

    @staticmethod
    def assert_error(response: dict, code: str, op: str | None = None) -> dict:
        """Assert response is an error with given code.

        Args:
            response: The response dict to check
            code: Expected error code
            op: Optional tool name to verify

        Returns:
            The error dict from the response
        """
        assert response.get("ok") is False, f"Expected error, got success: {response}"
        assert response.get("error", {}).get("code") == code, \
            f"Expected error code {code}, got {response.get('error', {}).get('code')}"
        assert response.get("text", "").startswith("❌ 오류 발생: ")
        if op:
            assert response.get("op") == op, f"Expected op={op}, got {response.get('op')}"
        return response.get("error", {})


@pytest.fixture
def assertions():
    """Fixture providing response assertion helpers."""
    return ResponseAssertions()


# ========== Storage Double ==========

def _matches(doc: dict[str, Any], f: Filter) -> bool:
    value = doc.get(f.field)
    if f.op == "==":
        return value == f.value
    if value is None:
        return False
    if f.op == ">=":
        return value >= f.value
    if f.op == "<=":
        return value <= f.value
    raise ValueError(f"unsupported filter operator: {f.op}")


class InMemoryGateway:
    """
    Dict-backed StorageGateway.

    Mirrors Firestore semantics the tools rely on: server-assigned
    timestamps, not-found errors on update/delete of missing documents.
    """

    def __init__(self) -> None:
        self.collections: dict[Collection, dict[str, dict[str, Any]]] = {c: {} for c in Collection}
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None
        self._seq = 0

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, collection: Collection, **fields: Any) -> str:
        """Insert a document directly (not recorded as a call)."""
        self._seq += 1
        record_id = f"seed{self._seq:04d}"
        now = datetime.now(timezone.utc)
        self.collections[collection][record_id] = {**fields, CREATED_AT: now, UPDATED_AT: now}
        return record_id

    def get(self, collection: Collection, record_id: str) -> dict[str, Any] | None:
        return self.collections[collection].get(record_id)

    async def add_record(self, collection: Collection, fields: dict[str, Any]) -> str:
        self.calls.append(("add", collection, dict(fields)))
        self._check_failure()
        self._seq += 1
        record_id = f"doc{self._seq:04d}"
        now = datetime.now(timezone.utc)
        data = {k: v for k, v in fields.items() if k not in TIMESTAMP_FIELDS}
        data[CREATED_AT] = now
        data[UPDATED_AT] = now
        self.collections[collection][record_id] = data
        return record_id

    async def query_records(self, collection: Collection, filters: Sequence[Filter]) -> list[dict]:
        self.calls.append(("query", collection, list(filters)))
        self._check_failure()
        return [
            {"id": rid, **doc}
            for rid, doc in self.collections[collection].items()
            if all(_matches(doc, f) for f in filters)
        ]

    async def update_record(self, collection: Collection, record_id: str, fields: dict[str, Any]) -> None:
        self.calls.append(("update", collection, record_id, dict(fields)))
        self._check_failure()
        doc = self.collections[collection].get(record_id)
        if doc is None:
            raise StorageError(f"No document to update: {collection.value}/{record_id}")
        doc.update({k: v for k, v in fields.items() if k not in TIMESTAMP_FIELDS})
        doc[UPDATED_AT] = datetime.now(timezone.utc)

    async def delete_record(self, collection: Collection, record_id: str) -> None:
        self.calls.append(("delete", collection, record_id))
        self._check_failure()
        if record_id not in self.collections[collection]:
            raise StorageError(f"No document to delete: {collection.value}/{record_id}")
        del self.collections[collection][record_id]


@pytest.fixture
def gateway():
    """Fresh in-memory storage gateway."""
    return InMemoryGateway()


@pytest.fixture
def dispatcher(gateway):
    """Dispatcher wired to the in-memory gateway."""
    from core.dispatcher import Dispatcher
    return Dispatcher(gateway)


@pytest.fixture
def mock_firestore_db():
    """
    Mock Firestore AsyncClient for FirestoreClient unit tests.

    collection(...) returns the same mock collection reference; query
    chaining (where(...).where(...)) returns the same mock query.
    """
    db = MagicMock()
    coll = MagicMock()
    query = MagicMock()
    doc_ref = MagicMock()

    db.collection.return_value = coll
    coll.where.return_value = query
    query.where.return_value = query
    query.get = AsyncMock(return_value=[])
    coll.add = AsyncMock(return_value=(None, MagicMock(id="new-doc-id")))
    coll.document.return_value = doc_ref
    doc_ref.update = AsyncMock(return_value=None)
    doc_ref.delete = AsyncMock(return_value=None)
    db.write_option.return_value = "exists-option"
    return db


@pytest.fixture
def new_york_process_zone(monkeypatch):
    """
    Run with PLANNER_TIMEZONE unset and the process zone set to America/New_York,
    which observes DST.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    monkeypatch.delenv("PLANNER_TIMEZONE", raising=False)
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
