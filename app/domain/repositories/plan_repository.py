"""
Plan and SubPlan Repository Interfaces.
"""

from app.domain.models.plan import Plan, SubPlan
from app.domain.repositories.base import BaseRepository


class PlanRepository(BaseRepository[Plan]):
    """Interface for Plan-specific operations."""


class SubPlanRepository(BaseRepository[SubPlan]):
    """Interface for SubPlan-specific operations."""
