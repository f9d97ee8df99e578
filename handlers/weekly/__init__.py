"""
Weekly plans handler package.

Exports WeeklyPlansHandler for weeklyPlans operations.
"""
from handlers.weekly.handler import WeeklyPlansHandler

__all__ = ["WeeklyPlansHandler"]
