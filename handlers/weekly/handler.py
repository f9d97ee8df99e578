"""
Weekly plans handler.

Implements add_weekly_plan and get_weekly_plans over the weeklyPlans collection.
"""
from __future__ import annotations

from config import Collection
from core.base_handler import BaseHandler
from lib.common import completion_glyph, or_none
from lib.records import WeeklyPlan
from lib.requests import AddWeeklyPlanRequest, GetWeeklyPlansRequest
from lib.types import SuccessResponse, between, equals


def _render_plan(plan: WeeklyPlan) -> tuple[str, list[str]]:
    return (
        f"{completion_glyph(plan.is_completed)} {plan.title}",
        [
            f"과목: {or_none(plan.subject)}",
            f"페이지: {or_none(plan.page_ranges)}",
            f"ID: {plan.id}",
        ],
    )


class WeeklyPlansHandler(BaseHandler):
    """Handler for weekly study plans."""

    COLLECTION = Collection.WEEKLY

    async def add_weekly_plan(self, req: AddWeeklyPlanRequest) -> SuccessResponse:
        record = WeeklyPlan(
            user_id=req.user_id,
            date=req.date,
            title=req.title,
            subject=req.subject,
            page_ranges=list(req.page_ranges),
            notes=req.notes,
        )
        plan_id = await self.add(record.to_document())
        text = (
            "✅ 주간 계획이 추가되었습니다!\n"
            f"ID: {plan_id}\n"
            f"제목: {req.title}\n"
            f"날짜: {req.date_text}"
        )
        return self._ok("add_weekly_plan", text, {"id": plan_id})

    async def get_weekly_plans(self, req: GetWeeklyPlansRequest) -> SuccessResponse:
        # Both bounds are instants as given; endDate is not widened to end of day
        docs = await self.query(
            [equals("userId", req.user_id), *between("date", req.start_date, req.end_date)]
        )
        plans = [WeeklyPlan.from_document(d) for d in docs]

        text = self.render_list(
            f"📆 {req.start_text} ~ {req.end_text} 주간 계획:",
            "해당 기간에 등록된 주간 계획이 없습니다.",
            plans,
            _render_plan,
        )
        return self._ok("get_weekly_plans", text, {"ids": [p.id for p in plans], "count": len(plans)})
