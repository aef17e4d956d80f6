"""
Notification Service

Serves the per-user inbox and the read flag.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.notification import Notification
from app.repositories.notification_repo import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationNotFoundError(Exception):
    pass


class NotificationService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.notification_repo = NotificationRepository(db)

    async def list_notifications(self, user_id: UUID) -> List[Notification]:
        return await self.notification_repo.get_by_user(user_id)

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> None:
        if not await self.notification_repo.mark_read(notification_id, user_id):
            raise NotificationNotFoundError("Notification not found")
