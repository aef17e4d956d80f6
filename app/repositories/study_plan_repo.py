"""
Study Plan Repository

Data access layer for StudyPlan model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.repositories.base import BaseRepository
from app.models.study_plan import StudyPlan


class StudyPlanRepository(BaseRepository[StudyPlan]):
    """Repository for StudyPlan model."""

    def __init__(self, db: AsyncSession):
        super().__init__(StudyPlan, db)

    async def get_by_user(self, user_id: UUID) -> List[StudyPlan]:
        """Sessions for a user, latest scheduled first."""
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.scheduled_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_for_user(self, plan_id: UUID, user_id: UUID) -> Optional[StudyPlan]:
        stmt = (
            select(self.model)
            .where(
                self.model.id == plan_id,
                self.model.user_id == user_id
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_many(self, plans: List[dict]) -> List[StudyPlan]:
        """Insert a batch of plans in one transaction."""
        instances = []
        for plan_data in plans:
            instance = StudyPlan(**plan_data)
            self.db.add(instance)
            instances.append(instance)
        await self.db.commit()
        for inst in instances:
            await self.db.refresh(inst)
        return instances
