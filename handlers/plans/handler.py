"""
Plans handler.

Implements complete_plan and delete_plan, which address a record in any
of the three collections by (collection, planId).
"""
from __future__ import annotations

from core.base_handler import BaseHandler
from lib.requests import CompletePlanRequest, DeletePlanRequest
from lib.types import SuccessResponse


class PlansHandler(BaseHandler):
    """
    Handler for cross-collection operations by ID.

    - complete_plan: isCompleted false -> true (no way back)
    - delete_plan: hard delete
    """

    async def complete_plan(self, req: CompletePlanRequest) -> SuccessResponse:
        await self.gateway.update_record(req.collection, req.plan_id, {"isCompleted": True})
        return self._ok(
            "complete_plan",
            f"✅ 계획이 완료되었습니다! (ID: {req.plan_id})",
            {"id": req.plan_id, "collection": req.collection.value},
        )

    async def delete_plan(self, req: DeletePlanRequest) -> SuccessResponse:
        await self.gateway.delete_record(req.collection, req.plan_id)
        return self._ok(
            "delete_plan",
            f"🗑️ 계획이 삭제되었습니다! (ID: {req.plan_id})",
            {"id": req.plan_id, "collection": req.collection.value},
        )
