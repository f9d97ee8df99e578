"""
Monthly goals handler package.

Exports MonthlyGoalsHandler for monthlyPlans operations.
"""
from handlers.monthly.handler import MonthlyGoalsHandler

__all__ = ["MonthlyGoalsHandler"]
