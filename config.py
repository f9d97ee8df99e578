"""
Configuration constants for the MCP server.
Centralizes collection names, record field names, and display glyphs.
"""
from enum import Enum
from typing import Final

SERVER_NAME: Final[str] = "studyplanner"
SERVER_VERSION: Final[str] = "1.0.0"


class Collection(str, Enum):
    """Firestore collections, one per record kind."""
    DAILY = "dailyPlans"
    WEEKLY = "weeklyPlans"
    MONTHLY = "monthlyPlans"


COLLECTION_NAMES: Final[list[str]] = [c.value for c in Collection]

# Server-assigned timestamp fields (never accepted from callers)
CREATED_AT: Final[str] = "createdAt"
UPDATED_AT: Final[str] = "updatedAt"
TIMESTAMP_FIELDS: Final[frozenset[str]] = frozenset({CREATED_AT, UPDATED_AT})

# Monthly goal priority (1: high, 2: medium, 3: low)
PRIORITY_VALUES: Final[list[int]] = [1, 2, 3]
DEFAULT_PRIORITY: Final[int] = 2
PRIORITY_GLYPHS: Final[dict[int, str]] = {
    1: "🔴",
    2: "🟡",
    3: "🟢",
}

# Display
COMPLETED_GLYPH: Final[str] = "✅"
PENDING_GLYPH: Final[str] = "⬜"
NONE_PLACEHOLDER: Final[str] = "없음"
ERROR_PREFIX: Final[str] = "❌ 오류 발생: "
DETAIL_INDENT: Final[str] = "   "

# Date formats accepted from callers
DATE_FORMAT_HINT: Final[str] = "YYYY-MM-DD"
MONTH_FORMAT_HINT: Final[str] = "YYYY-MM"
