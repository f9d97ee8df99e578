"""
Daily plans handler package.

Exports DailyPlansHandler for dailyPlans operations.
"""
from handlers.daily.handler import DailyPlansHandler

__all__ = ["DailyPlansHandler"]
