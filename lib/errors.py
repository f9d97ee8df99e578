"""
Standardized error handling for the MCP server.
Provides consistent error codes, the exceptions raised below the
dispatcher, and the helper that turns them into error envelopes.
"""
from enum import Enum

from lib.common import ng
from lib.types import ErrorResponse


class ErrorCode(str, Enum):
    """Standardized error codes used across the MCP server."""
    BAD_REQUEST = "BAD_REQUEST"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    STORAGE_ERROR = "STORAGE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class PlannerError(Exception):
    """Base class for failures converted to error envelopes."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PlannerError):
    """Missing required field, malformed date, or out-of-enum value."""

    code = ErrorCode.BAD_REQUEST


class UnknownTool(PlannerError):
    """Tool name not present in the catalog."""

    code = ErrorCode.UNKNOWN_TOOL

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class StorageError(PlannerError):
    """Any failure surfaced by the storage backend (message passed through)."""

    code = ErrorCode.STORAGE_ERROR


def error_response(op: str, exc: PlannerError) -> ErrorResponse:
    """Create an error envelope from a PlannerError."""
    return ng(op, exc.code, exc.message)


def internal_error(op: str, message: str) -> ErrorResponse:
    """Create an INTERNAL_ERROR error envelope."""
    return ng(op, ErrorCode.INTERNAL_ERROR, message)
