"""
Common utility functions: logging, envelopes, and display helpers.
"""
import sys
from typing import Any

from config import (
    COMPLETED_GLYPH,
    PENDING_GLYPH,
    NONE_PLACEHOLDER,
    ERROR_PREFIX,
)
from lib.types import ErrorResponse, SuccessResponse


def log(*a: Any) -> None:
    # stdout carries the stdio transport; diagnostics go to stderr
    print(*a, file=sys.stderr, flush=True)


def ok(op: str, text: str, data: dict[str, Any] | None = None) -> SuccessResponse:
    """Create a successful response carrying one rendered text block."""
    return {"ok": True, "op": op, "text": text, "data": data or {}}


def ng(op: str, code: str, message: str, extra: dict[str, Any] | None = None) -> ErrorResponse:
    """Create an error response carrying one rendered text block."""
    error: dict[str, Any] = {"code": str(getattr(code, "value", code)), "message": message}
    if extra:
        error.update(extra)
    return {"ok": False, "op": op, "text": f"{ERROR_PREFIX}{message}", "error": error}


def or_none(value: Any) -> str:
    """
    Render an optional display value.
    Empty strings, None, and empty sequences become the placeholder.
    """
    if value is None:
        return NONE_PLACEHOLDER
    if isinstance(value, (list, tuple)):
        joined = ", ".join(str(v) for v in value)
        return joined or NONE_PLACEHOLDER
    text = str(value)
    return text if text else NONE_PLACEHOLDER


def completion_glyph(is_completed: Any) -> str:
    """Binary completion indicator."""
    return COMPLETED_GLYPH if is_completed else PENDING_GLYPH
