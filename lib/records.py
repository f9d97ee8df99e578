"""
Planner record schemas.

Each record kind is a dataclass with:
  - to_document(): camelCase Firestore field map (timestamps excluded;
    the gateway stamps createdAt/updatedAt itself)
  - from_document(doc, doc_id): read a stored document back for display

Reserved fields (subjectId, parentMonthlyId, subtasks, tag,
relatedWeeklyIds, startDate on goals) are always written null or empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from config import DEFAULT_PRIORITY


@dataclass
class DailyPlan:
    """Daily study plan (dailyPlans)."""
    user_id: str
    date: datetime | None
    title: str
    subject: str = ""
    notes: str = ""
    is_completed: bool = False
    start_time: datetime | None = None
    end_time: datetime | None = None
    actual_study_time: int | float = 0
    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "date": self.date,
            "title": self.title,
            "subject": self.subject,
            "notes": self.notes,
            "isCompleted": self.is_completed,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "actualStudyTime": self.actual_study_time,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any], doc_id: str | None = None) -> DailyPlan:
        return cls(
            id=doc_id or doc.get("id"),
            user_id=doc.get("userId", ""),
            date=doc.get("date"),
            title=doc.get("title", ""),
            subject=doc.get("subject") or "",
            notes=doc.get("notes") or "",
            is_completed=bool(doc.get("isCompleted", False)),
            start_time=doc.get("startTime"),
            end_time=doc.get("endTime"),
            actual_study_time=doc.get("actualStudyTime") or 0,
        )


@dataclass
class WeeklyPlan:
    """Weekly study plan (weeklyPlans)."""
    user_id: str
    date: datetime | None
    title: str
    subject: str = ""
    page_ranges: list[str] = field(default_factory=list)
    notes: str = ""
    is_completed: bool = False
    subject_id: str | None = None
    parent_monthly_id: str | None = None
    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "date": self.date,
            "title": self.title,
            "subject": self.subject,
            "subjectId": None,
            "pageRanges": list(self.page_ranges),
            "notes": self.notes,
            "isCompleted": self.is_completed,
            "parentMonthlyId": None,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any], doc_id: str | None = None) -> WeeklyPlan:
        return cls(
            id=doc_id or doc.get("id"),
            user_id=doc.get("userId", ""),
            date=doc.get("date"),
            title=doc.get("title", ""),
            subject=doc.get("subject") or "",
            page_ranges=list(doc.get("pageRanges") or []),
            notes=doc.get("notes") or "",
            is_completed=bool(doc.get("isCompleted", False)),
            subject_id=doc.get("subjectId"),
            parent_monthly_id=doc.get("parentMonthlyId"),
        )


@dataclass
class MonthlyGoal:
    """Monthly goal (monthlyPlans)."""
    user_id: str
    month: str
    title: str
    subject: str = ""
    end_date: datetime | None = None
    priority: int = DEFAULT_PRIORITY
    notes: str = ""
    is_completed: bool = False
    id: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "month": self.month,
            "title": self.title,
            "subject": self.subject,
            "subjectId": None,
            "pageRanges": [],
            "startDate": None,
            "endDate": self.end_date,
            "subtasks": [],
            "tag": "",
            "priority": self.priority,
            "isCompleted": self.is_completed,
            "relatedWeeklyIds": [],
            "notes": self.notes,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any], doc_id: str | None = None) -> MonthlyGoal:
        return cls(
            id=doc_id or doc.get("id"),
            user_id=doc.get("userId", ""),
            month=doc.get("month", ""),
            title=doc.get("title", ""),
            subject=doc.get("subject") or "",
            end_date=doc.get("endDate"),
            priority=doc.get("priority", DEFAULT_PRIORITY),
            notes=doc.get("notes") or "",
            is_completed=bool(doc.get("isCompleted", False)),
        )
