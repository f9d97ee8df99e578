"""
Tool catalog.

Static, ordered list of the tools this server exposes, each with a JSON
Schema describing its arguments. validate_arguments() enforces the same
schemas that list_tools() advertises.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping

from config import COLLECTION_NAMES, DATE_FORMAT_HINT, DEFAULT_PRIORITY, MONTH_FORMAT_HINT, PRIORITY_VALUES
from lib.errors import UnknownTool, ValidationError
from lib.input_parser import as_str_list, coerce_number, coerce_str, is_blank


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, human description, and input schema of one tool."""
    name: str
    description: str
    input_schema: dict[str, Any]

    @property
    def properties(self) -> dict[str, dict[str, Any]]:
        return self.input_schema.get("properties", {})

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


def _object(properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


_USER_ID = {"type": "string", "description": "사용자 ID"}
_DATE = {"type": "string", "description": f"날짜 ({DATE_FORMAT_HINT} 형식)"}
_MONTH = {"type": "string", "description": f"월 ({MONTH_FORMAT_HINT} 형식)"}
_SUBJECT = {"type": "string", "description": "과목 (선택사항)", "default": ""}
_NOTES = {"type": "string", "description": "메모 (선택사항)", "default": ""}
_COLLECTION = {
    "type": "string",
    "description": "컬렉션 이름 (dailyPlans, weeklyPlans, monthlyPlans)",
    "enum": COLLECTION_NAMES,
}
_PLAN_ID = {"type": "string", "description": "계획 ID"}


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="add_daily_plan",
        description="일일 학습 계획을 추가합니다",
        input_schema=_object(
            {
                "userId": _USER_ID,
                "date": _DATE,
                "title": {"type": "string", "description": "계획 제목"},
                "subject": _SUBJECT,
                "notes": _NOTES,
            },
            ["userId", "date", "title"],
        ),
    ),
    ToolDescriptor(
        name="add_weekly_plan",
        description="주간 학습 계획을 추가합니다",
        input_schema=_object(
            {
                "userId": _USER_ID,
                "date": _DATE,
                "title": {"type": "string", "description": "계획 제목"},
                "subject": _SUBJECT,
                "pageRanges": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": '페이지 범위 (예: ["45-67", "100-120"])',
                    "default": [],
                },
                "notes": _NOTES,
            },
            ["userId", "date", "title"],
        ),
    ),
    ToolDescriptor(
        name="add_monthly_goal",
        description="월간 목표를 추가합니다",
        input_schema=_object(
            {
                "userId": _USER_ID,
                "month": _MONTH,
                "title": {"type": "string", "description": "목표 제목"},
                "subject": _SUBJECT,
                "endDate": {"type": "string", "description": f"목표 종료일 ({DATE_FORMAT_HINT} 형식, 선택사항)"},
                "priority": {
                    "type": "number",
                    "description": "우선순위 (1: 높음, 2: 중간, 3: 낮음)",
                    "default": DEFAULT_PRIORITY,
                    "enum": PRIORITY_VALUES,
                },
                "notes": _NOTES,
            },
            ["userId", "month", "title"],
        ),
    ),
    ToolDescriptor(
        name="get_daily_plans",
        description="특정 날짜의 일일 계획을 조회합니다",
        input_schema=_object(
            {"userId": _USER_ID, "date": _DATE},
            ["userId", "date"],
        ),
    ),
    ToolDescriptor(
        name="get_weekly_plans",
        description="특정 주의 주간 계획을 조회합니다",
        input_schema=_object(
            {
                "userId": _USER_ID,
                "startDate": {"type": "string", "description": f"주 시작일 ({DATE_FORMAT_HINT} 형식)"},
                "endDate": {"type": "string", "description": f"주 종료일 ({DATE_FORMAT_HINT} 형식)"},
            },
            ["userId", "startDate", "endDate"],
        ),
    ),
    ToolDescriptor(
        name="get_monthly_goals",
        description="특정 월의 월간 목표를 조회합니다",
        input_schema=_object(
            {"userId": _USER_ID, "month": _MONTH},
            ["userId", "month"],
        ),
    ),
    ToolDescriptor(
        name="complete_plan",
        description="계획을 완료 상태로 변경합니다",
        input_schema=_object(
            {"collection": _COLLECTION, "planId": _PLAN_ID},
            ["collection", "planId"],
        ),
    ),
    ToolDescriptor(
        name="delete_plan",
        description="계획을 삭제합니다",
        input_schema=_object(
            {"collection": _COLLECTION, "planId": _PLAN_ID},
            ["collection", "planId"],
        ),
    ),
)

_BY_NAME: dict[str, ToolDescriptor] = {t.name: t for t in TOOLS}


def list_tools() -> list[ToolDescriptor]:
    """All tool descriptors, in catalog order."""
    return list(TOOLS)


def get_tool(name: str) -> ToolDescriptor:
    """
    Look up a tool by name.

    Raises:
        UnknownTool: If name is not in the catalog
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownTool(name) from None


def _coerce(name: str, prop: dict[str, Any], value: Any) -> Any:
    """Coerce one argument to its declared schema type."""
    kind = prop.get("type")
    if kind == "string":
        out = coerce_str(value)
        if out is None:
            raise ValidationError(f"{name} must be a string")
        return out
    if kind in ("number", "integer"):
        out = coerce_number(value)
        if out is None:
            raise ValidationError(f"{name} must be a number")
        return out
    if kind == "array":
        out = as_str_list(value)
        if out is None:
            raise ValidationError(f"{name} must be an array of strings")
        return out
    return value


def validate_arguments(tool: ToolDescriptor, args: Any) -> dict[str, Any]:
    """
    Validate an argument bag against a tool's input schema.

    - required fields must be present and non-blank
    - values are coerced to their declared type
    - enum constraints are enforced
    - absent optional fields take the schema default
    Arguments not declared by the schema are dropped.

    Args:
        tool: Descriptor whose schema to enforce
        args: Raw argument mapping (None is treated as empty)

    Returns:
        Cleaned argument dict

    Raises:
        ValidationError: On the first violation found
    """
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        raise ValidationError("arguments must be an object")

    for name in tool.required:
        if is_blank(args.get(name)):
            raise ValidationError(f"{name} is required")

    cleaned: dict[str, Any] = {}
    for name, prop in tool.properties.items():
        raw = args.get(name)
        if raw is None:
            if "default" in prop:
                cleaned[name] = copy.deepcopy(prop["default"])
            continue

        value = _coerce(name, prop, raw)
        allowed = prop.get("enum")
        if allowed is not None and value not in allowed:
            choices = ", ".join(str(v) for v in allowed)
            raise ValidationError(f"{name} must be one of: {choices} (got {raw!r})")
        cleaned[name] = value

    return cleaned
