"""
Daily plans handler.

Implements add_daily_plan and get_daily_plans over the dailyPlans collection.
"""
from __future__ import annotations

from config import Collection
from core.base_handler import BaseHandler
from lib.common import completion_glyph, or_none
from lib.dates import day_bounds
from lib.records import DailyPlan
from lib.requests import AddDailyPlanRequest, GetDailyPlansRequest
from lib.types import SuccessResponse, between, equals


def _render_plan(plan: DailyPlan) -> tuple[str, list[str]]:
    return (
        f"{completion_glyph(plan.is_completed)} {plan.title}",
        [f"과목: {or_none(plan.subject)}", f"ID: {plan.id}"],
    )


class DailyPlansHandler(BaseHandler):
    """Handler for daily study plans."""

    COLLECTION = Collection.DAILY

    async def add_daily_plan(self, req: AddDailyPlanRequest) -> SuccessResponse:
        """Create a daily plan (not completed, no study time yet)."""
        record = DailyPlan(
            user_id=req.user_id,
            date=req.date,
            title=req.title,
            subject=req.subject,
            notes=req.notes,
        )
        plan_id = await self.add(record.to_document())
        text = (
            "✅ 일일 계획이 추가되었습니다!\n"
            f"ID: {plan_id}\n"
            f"제목: {req.title}\n"
            f"날짜: {req.date_text}"
        )
        return self._ok("add_daily_plan", text, {"id": plan_id})

    async def get_daily_plans(self, req: GetDailyPlansRequest) -> SuccessResponse:
        """List a user's plans dated anywhere within the requested calendar day."""
        start, end = day_bounds(req.date)
        docs = await self.query([equals("userId", req.user_id), *between("date", start, end)])
        plans = [DailyPlan.from_document(d) for d in docs]

        text = self.render_list(
            f"📅 {req.date_text} 일일 계획:",
            f"{req.date_text}에 등록된 일일 계획이 없습니다.",
            plans,
            _render_plan,
        )
        return self._ok("get_daily_plans", text, {"ids": [p.id for p in plans], "count": len(plans)})
