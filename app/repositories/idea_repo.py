"""
Idea Repository

Data access layer for Idea model.
"""

from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.repositories.base import BaseRepository
from app.models.idea import Idea


class IdeaRepository(BaseRepository[Idea]):
    """Repository for Idea model."""

    def __init__(self, db: AsyncSession):
        super().__init__(Idea, db)

    async def get_newest_first(self) -> List[Idea]:
        return await self.get_all(order_by=self.model.created_at.desc())

    async def like(self, idea_id: UUID) -> bool:
        """
        Increment likes in SQL so concurrent likes are not lost.

        Returns:
            False when no idea has this id
        """
        result = await self.db.execute(
            update(Idea)
            .where(Idea.id == idea_id)
            .values(likes=Idea.likes + 1)
        )
        await self.db.commit()
        return result.rowcount > 0
