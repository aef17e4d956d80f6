"""
User Repository

Data access layer for User model.
All user-related database operations.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.repositories.base import BaseRepository
from app.models import User
from app.models.base import utc_now


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    # =================
    # Get by identity uid
    # =================
    async def get_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        """Get the user bound to an identity-provider uid."""
        result = await self.db.execute(
            select(User).where(User.firebase_uid == firebase_uid)
        )
        return result.scalar_one_or_none()

    # =================
    # Create user
    # =================
    async def create_user(
        self,
        firebase_uid: str,
        email: str,
        name: str,
        profile_image: Optional[str] = None,
    ) -> User:
        """Create a new user from identity claims."""
        return await self.create(
            firebase_uid=firebase_uid,
            email=email,
            name=name,
            profile_image=profile_image,
        )

    # =================
    # Update user
    # =================
    async def update_user(self, user_id, **kwargs) -> Optional[User]:
        """Update user fields."""
        return await self.update(user_id, **kwargs)

    # =================
    # Award points
    # =================
    async def add_study_points(self, user_id: UUID, points: int) -> None:
        """
        Increment study points relative to the stored value.

        Does not commit; runs inside the caller's transaction.
        """
        await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(study_points=User.study_points + points, updated_at=utc_now())
        )
