"""
Notification and Peer Match Repositories

Per-user inbox reads and the read flag; peer matches are read-only.
"""

from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.repositories.base import BaseRepository
from app.models.notification import Notification
from app.models.peer_match import PeerMatch


class NotificationRepository(BaseRepository[Notification]):
    """Repository for Notification model."""

    def __init__(self, db: AsyncSession):
        super().__init__(Notification, db)

    async def get_by_user(self, user_id: UUID) -> List[Notification]:
        result = await self.db.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> bool:
        """Set read=True on one of the user's notifications. Never sets it back."""
        result = await self.db.execute(
            update(Notification)
            .where(
                Notification.id == notification_id,
                Notification.user_id == user_id,
            )
            .values(read=True)
        )
        await self.db.commit()
        return result.rowcount > 0


class PeerMatchRepository(BaseRepository[PeerMatch]):
    """Repository for PeerMatch model."""

    def __init__(self, db: AsyncSession):
        super().__init__(PeerMatch, db)

    async def get_by_user(self, user_id: UUID) -> List[PeerMatch]:
        """Matches for a user, most compatible first."""
        result = await self.db.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.compatibility.desc())
        )
        return list(result.scalars().all())
