"""
Typed tool requests.

One frozen dataclass per tool. from_args() converts an argument mapping
already checked by core.catalog.validate_arguments() (required fields
present, types coerced, defaults applied) into the typed request,
parsing calendar dates on the way.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from config import Collection, DEFAULT_PRIORITY
from lib.dates import parse_date
from lib.errors import ValidationError


@dataclass(frozen=True)
class AddDailyPlanRequest:
    user_id: str
    date: datetime
    date_text: str
    title: str
    subject: str = ""
    notes: str = ""

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> AddDailyPlanRequest:
        return cls(
            user_id=args["userId"],
            date=parse_date(args["date"], "date"),
            date_text=args["date"],
            title=args["title"],
            subject=args.get("subject", ""),
            notes=args.get("notes", ""),
        )


@dataclass(frozen=True)
class AddWeeklyPlanRequest:
    user_id: str
    date: datetime
    date_text: str
    title: str
    subject: str = ""
    page_ranges: tuple[str, ...] = field(default_factory=tuple)
    notes: str = ""

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> AddWeeklyPlanRequest:
        return cls(
            user_id=args["userId"],
            date=parse_date(args["date"], "date"),
            date_text=args["date"],
            title=args["title"],
            subject=args.get("subject", ""),
            page_ranges=tuple(args.get("pageRanges") or ()),
            notes=args.get("notes", ""),
        )


@dataclass(frozen=True)
class AddMonthlyGoalRequest:
    user_id: str
    month: str
    title: str
    subject: str = ""
    end_date: datetime | None = None
    end_date_text: str | None = None
    priority: int = DEFAULT_PRIORITY
    notes: str = ""

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> AddMonthlyGoalRequest:
        # An empty endDate means "no deadline"
        end_text = args.get("endDate") or None
        return cls(
            user_id=args["userId"],
            month=args["month"],
            title=args["title"],
            subject=args.get("subject", ""),
            end_date=parse_date(end_text, "endDate") if end_text else None,
            end_date_text=end_text,
            priority=int(args.get("priority", DEFAULT_PRIORITY)),
            notes=args.get("notes", ""),
        )


@dataclass(frozen=True)
class GetDailyPlansRequest:
    user_id: str
    date: datetime
    date_text: str

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> GetDailyPlansRequest:
        return cls(
            user_id=args["userId"],
            date=parse_date(args["date"], "date"),
            date_text=args["date"],
        )


@dataclass(frozen=True)
class GetWeeklyPlansRequest:
    user_id: str
    start_date: datetime
    end_date: datetime
    start_text: str
    end_text: str

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> GetWeeklyPlansRequest:
        return cls(
            user_id=args["userId"],
            start_date=parse_date(args["startDate"], "startDate"),
            end_date=parse_date(args["endDate"], "endDate"),
            start_text=args["startDate"],
            end_text=args["endDate"],
        )


@dataclass(frozen=True)
class GetMonthlyGoalsRequest:
    user_id: str
    month: str

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> GetMonthlyGoalsRequest:
        return cls(user_id=args["userId"], month=args["month"])


@dataclass(frozen=True)
class PlanRefRequest:
    """Target of complete_plan / delete_plan."""
    collection: Collection
    plan_id: str

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> PlanRefRequest:
        try:
            collection = Collection(args["collection"])
        except ValueError:
            raise ValidationError(f"unknown collection: {args['collection']}") from None
        return cls(collection=collection, plan_id=args["planId"])


CompletePlanRequest = PlanRefRequest
DeletePlanRequest = PlanRefRequest
