"""
Quiz Repository

Data access layer for the Quiz model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.repositories.base import BaseRepository
from app.models.quiz import Quiz


class QuizRepository(BaseRepository[Quiz]):
    """Repository for Quiz model."""

    def __init__(self, db: AsyncSession):
        super().__init__(Quiz, db)

    async def get_by_user(self, user_id: UUID) -> List[Quiz]:
        stmt = (
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_completed_by_user(self, user_id: UUID) -> List[Quiz]:
        stmt = (
            select(self.model)
            .where(
                self.model.user_id == user_id,
                self.model.completed.is_(True)
            )
            .order_by(self.model.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_for_user(self, quiz_id: UUID, user_id: UUID) -> Optional[Quiz]:
        stmt = (
            select(self.model)
            .where(
                self.model.id == quiz_id,
                self.model.user_id == user_id
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_completed(self, quiz_id: UUID, user_id: UUID, score: int) -> bool:
        """
        Flip completed false -> true and store the score in one statement.

        Does not commit; runs inside the caller's transaction.

        Returns:
            False when the quiz was already completed (or is not the user's)
        """
        result = await self.db.execute(
            update(Quiz)
            .where(
                Quiz.id == quiz_id,
                Quiz.user_id == user_id,
                Quiz.completed.is_(False)
            )
            .values(score=score, completed=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
