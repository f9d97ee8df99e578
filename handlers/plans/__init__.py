"""
Plans handler package.

Exports PlansHandler for complete/delete by ID.
"""
from handlers.plans.handler import PlansHandler

__all__ = ["PlansHandler"]
