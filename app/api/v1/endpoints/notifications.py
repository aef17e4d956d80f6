"""
Notification Endpoints

Endpoints:
----------
- GET  /notifications                      - List user notifications
- PUT  /notifications/{notification_id}/read - Mark one as read
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.notification import NotificationListResponse
from app.services.notification_service import NotificationService, NotificationNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="List notifications for the current user",
)
async def list_notifications(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    notifications = await NotificationService(db).list_notifications(current_user.id)
    return {"notifications": notifications}


@router.put(
    "/{notification_id}/read",
    response_model=MessageResponse,
    summary="Mark a notification as read",
)
async def mark_read(
    notification_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        await NotificationService(db).mark_read(notification_id, current_user.id)
    except NotificationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Notification marked as read"}
