"""
Type definitions for the MCP server.
Provides type safety for responses and storage query filters.
"""
from typing import Any, Literal, NamedTuple, TypedDict


class ErrorDetail(TypedDict):
    """Error detail structure."""
    code: str
    message: str


class SuccessResponse(TypedDict):
    """Successful tool response."""
    ok: bool
    op: str
    text: str
    data: dict[str, Any]


class ErrorResponse(TypedDict):
    """Error tool response."""
    ok: bool
    op: str
    text: str
    error: ErrorDetail


# Union type for all tool responses
Response = SuccessResponse | ErrorResponse

# Stored document as returned by the gateway ("id" plus document fields)
Document = dict[str, Any]

FilterOp = Literal["==", ">=", "<="]
FILTER_OPS: frozenset[str] = frozenset({"==", ">=", "<="})


class Filter(NamedTuple):
    """One conjunct of a storage query."""
    field: str
    op: FilterOp
    value: Any


def equals(field: str, value: Any) -> Filter:
    """Equality predicate."""
    return Filter(field, "==", value)


def between(field: str, lower: Any, upper: Any) -> list[Filter]:
    """Two-sided inclusive range on a single field."""
    return [Filter(field, ">=", lower), Filter(field, "<=", upper)]
