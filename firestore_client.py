"""
Cloud Firestore client using firebase-admin.
Provides Service Account authentication and the four storage operations
the planner tools need (add / query / update / delete).
"""
import json
from typing import Any, Protocol, Sequence

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1 import SERVER_TIMESTAMP
from google.cloud.firestore_v1.base_query import FieldFilter

from config import Collection, SERVER_NAME, TIMESTAMP_FIELDS, CREATED_AT, UPDATED_AT
from lib.common import log
from lib.errors import StorageError
from lib.types import Document, Filter, FILTER_OPS


class StorageGateway(Protocol):
    """Capability interface over the document store."""

    async def add_record(self, collection: Collection, fields: dict[str, Any]) -> str:
        ...

    async def query_records(self, collection: Collection, filters: Sequence[Filter]) -> list[Document]:
        ...

    async def update_record(self, collection: Collection, record_id: str, fields: dict[str, Any]) -> None:
        ...

    async def delete_record(self, collection: Collection, record_id: str) -> None:
        ...


def _backend_message(e: GoogleAPIError) -> str:
    return getattr(e, "message", None) or str(e)


def _without_timestamps(fields: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in TIMESTAMP_FIELDS}


class FirestoreClient:
    """Wrapper around the async Firestore client implementing StorageGateway."""

    def __init__(self, db: Any):
        """
        Args:
            db: google.cloud.firestore AsyncClient (or a test double)
        """
        self.db = db

    @classmethod
    def from_service_account(cls, credentials_json: str | dict) -> "FirestoreClient":
        """
        Initialize the client with Service Account credentials.

        Args:
            credentials_json: Either a JSON string or dict containing
                             the Service Account credentials.
        """
        if isinstance(credentials_json, str):
            credentials_json = json.loads(credentials_json)
        try:
            app = firebase_admin.get_app(SERVER_NAME)
        except ValueError:
            cred = credentials.Certificate(credentials_json)
            app = firebase_admin.initialize_app(cred, name=SERVER_NAME)
        return cls(firestore_async.client(app))

    async def add_record(self, collection: Collection, fields: dict[str, Any]) -> str:
        """Create a document with server-assigned createdAt/updatedAt; return its ID."""
        data = _without_timestamps(fields)
        data[CREATED_AT] = SERVER_TIMESTAMP
        data[UPDATED_AT] = SERVER_TIMESTAMP
        log("FIRESTORE add", collection.value)
        try:
            _, ref = await self.db.collection(collection.value).add(data)
        except GoogleAPIError as e:
            raise StorageError(_backend_message(e)) from e
        return ref.id

    async def query_records(self, collection: Collection, filters: Sequence[Filter]) -> list[Document]:
        """
        Return every document matching all filters (conjunction).

        Each returned dict carries the document ID under "id".
        """
        query = self.db.collection(collection.value)
        for f in filters:
            if f.op not in FILTER_OPS:
                raise ValueError(f"unsupported filter operator: {f.op}")
            query = query.where(filter=FieldFilter(f.field, f.op, f.value))
        log("FIRESTORE query", collection.value, [(f.field, f.op) for f in filters])
        try:
            snapshots = await query.get()
        except GoogleAPIError as e:
            raise StorageError(_backend_message(e)) from e
        return [{"id": snap.id, **(snap.to_dict() or {})} for snap in snapshots]

    async def update_record(self, collection: Collection, record_id: str, fields: dict[str, Any]) -> None:
        """Update fields of an existing document and re-stamp updatedAt."""
        data = _without_timestamps(fields)
        data[UPDATED_AT] = SERVER_TIMESTAMP
        log("FIRESTORE update", collection.value, record_id)
        try:
            await self.db.collection(collection.value).document(record_id).update(data)
        except GoogleAPIError as e:
            raise StorageError(_backend_message(e)) from e

    async def delete_record(self, collection: Collection, record_id: str) -> None:
        """Hard-delete an existing document (missing documents are an error)."""
        ref = self.db.collection(collection.value).document(record_id)
        log("FIRESTORE delete", collection.value, record_id)
        try:
            await ref.delete(option=self.db.write_option(exists=True))
        except GoogleAPIError as e:
            raise StorageError(_backend_message(e)) from e


# Singleton instance for the application
_firestore_client: FirestoreClient | None = None


def get_firestore_client() -> FirestoreClient:
    """
    Get the global FirestoreClient instance.
    Initializes from environment variables on first call.
    """
    global _firestore_client
    if _firestore_client is None:
        from env_loader import get_firebase_credentials
        _firestore_client = FirestoreClient.from_service_account(get_firebase_credentials())
    return _firestore_client


def reset_firestore_client() -> None:
    """Reset the global client (useful for testing)."""
    global _firestore_client
    _firestore_client = None
