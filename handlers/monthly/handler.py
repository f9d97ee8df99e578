"""
Monthly goals handler.

Implements add_monthly_goal and get_monthly_goals over the monthlyPlans collection.
"""
from __future__ import annotations

from typing import Any

from config import Collection, PRIORITY_GLYPHS
from core.base_handler import BaseHandler
from lib.common import completion_glyph, or_none
from lib.records import MonthlyGoal
from lib.requests import AddMonthlyGoalRequest, GetMonthlyGoalsRequest
from lib.types import SuccessResponse, equals


def priority_glyph(priority: Any) -> str:
    """1 = high, 2 = medium, anything else = low."""
    if priority in (1, 2):
        return PRIORITY_GLYPHS[priority]
    return PRIORITY_GLYPHS[3]


def _render_goal(goal: MonthlyGoal) -> tuple[str, list[str]]:
    return (
        f"{completion_glyph(goal.is_completed)} {priority_glyph(goal.priority)} {goal.title}",
        [f"과목: {or_none(goal.subject)}", f"ID: {goal.id}"],
    )


class MonthlyGoalsHandler(BaseHandler):
    """Handler for monthly goals."""

    COLLECTION = Collection.MONTHLY

    async def add_monthly_goal(self, req: AddMonthlyGoalRequest) -> SuccessResponse:
        """Create a monthly goal; the deadline line is shown only when endDate was given."""
        record = MonthlyGoal(
            user_id=req.user_id,
            month=req.month,
            title=req.title,
            subject=req.subject,
            end_date=req.end_date,
            priority=req.priority,
            notes=req.notes,
        )
        goal_id = await self.add(record.to_document())
        text = (
            "✅ 월간 목표가 추가되었습니다!\n"
            f"ID: {goal_id}\n"
            f"제목: {req.title}\n"
            f"월: {req.month}"
        )
        if req.end_date_text:
            text += f"\n마감일: {req.end_date_text}"
        return self._ok("add_monthly_goal", text, {"id": goal_id})

    async def get_monthly_goals(self, req: GetMonthlyGoalsRequest) -> SuccessResponse:
        docs = await self.query([equals("userId", req.user_id), equals("month", req.month)])
        goals = [MonthlyGoal.from_document(d) for d in docs]

        text = self.render_list(
            f"🎯 {req.month} 월간 목표:",
            f"{req.month}에 등록된 월간 목표가 없습니다.",
            goals,
            _render_goal,
        )
        return self._ok("get_monthly_goals", text, {"ids": [g.id for g in goals], "count": len(goals)})
