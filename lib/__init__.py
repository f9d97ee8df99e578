"""
Utility libraries for the MCP server.
Contains pure functions, record schemas, and typed requests.
"""
from .common import log, ok, ng, or_none, completion_glyph
from .errors import ErrorCode, PlannerError, ValidationError, UnknownTool, StorageError
from .records import DailyPlan, WeeklyPlan, MonthlyGoal
from .types import (
    Response,
    SuccessResponse,
    ErrorResponse,
    ErrorDetail,
    Document,
    Filter,
    equals,
    between,
)

__all__ = [
    # Response types
    "Response",
    "SuccessResponse",
    "ErrorResponse",
    "ErrorDetail",
    # Storage types
    "Document",
    "Filter",
    "equals",
    "between",
    # Records
    "DailyPlan",
    "WeeklyPlan",
    "MonthlyGoal",
    # Errors
    "ErrorCode",
    "PlannerError",
    "ValidationError",
    "UnknownTool",
    "StorageError",
    # Functions
    "log",
    "ok",
    "ng",
    "or_none",
    "completion_glyph",
]
