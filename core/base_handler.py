"""
Base handler class for collection-backed tool operations.

Provides common functionality for all handlers:
- Storage gateway access bound to one collection
- Numbered list rendering
- Response helpers (ok)
"""
from abc import ABC
from typing import Any, Callable, ClassVar, Iterable, Sequence

from config import Collection, DETAIL_INDENT
from firestore_client import StorageGateway
from lib.common import ok
from lib.types import Document, Filter, SuccessResponse


class BaseHandler(ABC):
    """
    Abstract base class for all collection-backed handlers.

    Subclasses must define:
    - COLLECTION: the collection their add/get tools operate on

    Example:
        class DailyPlansHandler(BaseHandler):
            COLLECTION = Collection.DAILY
    """

    COLLECTION: ClassVar[Collection | None] = None

    def __init__(self, gateway: StorageGateway) -> None:
        """
        Initialize handler with a storage gateway.

        Args:
            gateway: StorageGateway implementation (FirestoreClient in production)
        """
        self.gateway = gateway

    # === Storage ===

    async def add(self, fields: dict[str, Any]) -> str:
        """Create a record in this handler's collection and return its ID."""
        return await self.gateway.add_record(self._collection(), fields)

    async def query(self, filters: Sequence[Filter]) -> list[Document]:
        """Query this handler's collection with a conjunction of filters."""
        return await self.gateway.query_records(self._collection(), filters)

    def _collection(self) -> Collection:
        if self.COLLECTION is None:
            raise NotImplementedError(f"{type(self).__name__} has no COLLECTION")
        return self.COLLECTION

    # === Rendering ===

    @staticmethod
    def render_list(
        header: str,
        empty_message: str,
        items: Iterable[Any],
        render_item: Callable[[Any], tuple[str, list[str]]],
    ) -> str:
        """
        Render a numbered list.

        Args:
            header: First line when the list is non-empty
            empty_message: Whole text when there are no items
            items: Records to render
            render_item: record -> (headline, detail lines)

        Returns:
            "header\\n\\n1. headline\\n   detail\\n\\n2. ..." or empty_message
        """
        blocks = []
        for i, item in enumerate(items, 1):
            headline, details = render_item(item)
            lines = [f"{i}. {headline}"] + [f"{DETAIL_INDENT}{d}" for d in details]
            blocks.append("\n".join(lines))
        if not blocks:
            return empty_message
        return f"{header}\n\n" + "\n\n".join(blocks)

    # === Response Helpers ===

    def _ok(self, op: str, text: str, data: dict[str, Any] | None = None) -> SuccessResponse:
        """
        Return success response.

        Args:
            op: Tool name
            text: Rendered reply
            data: Structured payload (IDs, counts)

        Returns:
            Success response dict
        """
        return ok(op, text, data or {})
