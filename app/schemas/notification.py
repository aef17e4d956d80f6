from datetime import datetime
from typing import List, Optional
from uuid import UUID

from app.models.peer_match import PeerMatchStatus
from app.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    id: UUID
    user_id: UUID
    title: str
    message: str
    type: str
    read: bool
    created_at: datetime


class NotificationListResponse(CamelModel):
    notifications: List[NotificationResponse]


class PeerMatchResponse(CamelModel):
    id: UUID
    user_id: UUID
    matched_user_id: UUID
    compatibility: Optional[int] = None
    subjects: Optional[List[str]] = None
    status: PeerMatchStatus
    created_at: datetime


class PeerMatchListResponse(CamelModel):
    matches: List[PeerMatchResponse]
