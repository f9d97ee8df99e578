"""
Tool dispatcher.

Maps a tool invocation (name + argument bag) to:
1. schema validation against the catalog,
2. conversion into the tool's typed request,
3. exactly one storage operation via the matching handler,
and always returns an envelope dict; failures never propagate past invoke().
"""
from __future__ import annotations

import traceback
from typing import Any, Awaitable, Callable, NamedTuple

from core import catalog
from firestore_client import StorageGateway
from handlers.daily import DailyPlansHandler
from handlers.monthly import MonthlyGoalsHandler
from handlers.plans import PlansHandler
from handlers.weekly import WeeklyPlansHandler
from lib.common import log
from lib.errors import PlannerError, error_response, internal_error
from lib.types import Response
from lib.requests import (
    AddDailyPlanRequest,
    AddMonthlyGoalRequest,
    AddWeeklyPlanRequest,
    CompletePlanRequest,
    DeletePlanRequest,
    GetDailyPlansRequest,
    GetMonthlyGoalsRequest,
    GetWeeklyPlansRequest,
)


class Route(NamedTuple):
    """Typed request constructor and the handler method that serves it."""
    request_type: Any
    handle: Callable[[Any], Awaitable[Response]]


class Dispatcher:
    """
    Entry point for tool invocations.

    The storage gateway is injected so tests can supply a double.
    """

    def __init__(self, gateway: StorageGateway) -> None:
        self.gateway = gateway
        daily = DailyPlansHandler(gateway)
        weekly = WeeklyPlansHandler(gateway)
        monthly = MonthlyGoalsHandler(gateway)
        plans = PlansHandler(gateway)

        self.routes: dict[str, Route] = {
            "add_daily_plan": Route(AddDailyPlanRequest, daily.add_daily_plan),
            "add_weekly_plan": Route(AddWeeklyPlanRequest, weekly.add_weekly_plan),
            "add_monthly_goal": Route(AddMonthlyGoalRequest, monthly.add_monthly_goal),
            "get_daily_plans": Route(GetDailyPlansRequest, daily.get_daily_plans),
            "get_weekly_plans": Route(GetWeeklyPlansRequest, weekly.get_weekly_plans),
            "get_monthly_goals": Route(GetMonthlyGoalsRequest, monthly.get_monthly_goals),
            "complete_plan": Route(CompletePlanRequest, plans.complete_plan),
            "delete_plan": Route(DeletePlanRequest, plans.delete_plan),
        }

    async def invoke(self, tool_name: str, args: Any) -> Response:
        """
        Run one tool.

        Args:
            tool_name: Catalog name of the tool
            args: Untyped argument mapping from the caller

        Returns:
            Success envelope {"ok": True, "op", "text", "data"} or
            error envelope {"ok": False, "op", "text", "error": {code, message}}
        """
        try:
            tool = catalog.get_tool(tool_name)
            route = self.routes[tool.name]
            cleaned = catalog.validate_arguments(tool, args)
            request = route.request_type.from_args(cleaned)
            return await route.handle(request)
        except PlannerError as e:
            log(f"TOOL {tool_name} failed [{e.code.value}]: {e.message}")
            return error_response(tool_name, e)
        except Exception as e:
            log(f"TOOL {tool_name} crashed: {e!r}\n{traceback.format_exc()}")
            return internal_error(tool_name, str(e) or type(e).__name__)
