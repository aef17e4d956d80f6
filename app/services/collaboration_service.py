"""
Collaboration Service

Study groups, the idea marketplace and peer matches.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.idea import Idea
from app.models.peer_match import PeerMatch
from app.models.study_group import StudyGroup
from app.repositories.idea_repo import IdeaRepository
from app.repositories.notification_repo import PeerMatchRepository
from app.repositories.study_group_repo import StudyGroupRepository
from app.schemas.idea import IdeaCreate
from app.schemas.study_group import StudyGroupCreate

logger = logging.getLogger(__name__)


class CollaborationError(Exception):
    pass


class StudyGroupNotFoundError(CollaborationError):
    pass


class IdeaNotFoundError(CollaborationError):
    pass


class CollaborationService:
    """Service for groups, ideas and peer matches."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.group_repo = StudyGroupRepository(db)
        self.idea_repo = IdeaRepository(db)
        self.match_repo = PeerMatchRepository(db)

    # ============================================================
    # STUDY GROUPS
    # ============================================================

    async def list_groups(self) -> List[StudyGroup]:
        return await self.group_repo.get_active()

    async def list_user_groups(self, user_id: UUID) -> List[StudyGroup]:
        return await self.group_repo.get_by_member(user_id)

    async def create_group(self, owner_id: UUID, data: StudyGroupCreate) -> StudyGroup:
        """Create a group; the owner becomes its first member."""
        group = await self.group_repo.create_with_owner(
            owner_id=owner_id,
            name=data.name,
            subject=data.subject,
            description=data.description,
        )
        logger.info(f"User {owner_id} created study group {group.id}")
        return group

    async def join_group(self, group_id: UUID, user_id: UUID) -> None:
        """
        Add a membership row and bump the member count.

        Raises:
            StudyGroupNotFoundError: unknown or inactive group
        """
        group = await self.group_repo.get_active_by_id(group_id)
        if not group:
            raise StudyGroupNotFoundError("Study group not found")
        await self.group_repo.join(group_id, user_id)

    # ============================================================
    # IDEAS
    # ============================================================

    async def list_ideas(self) -> List[Idea]:
        return await self.idea_repo.get_newest_first()

    async def create_idea(self, user_id: UUID, data: IdeaCreate) -> Idea:
        return await self.idea_repo.create(
            user_id=user_id,
            likes=0,
            **data.model_dump(),
        )

    async def like_idea(self, idea_id: UUID) -> None:
        if not await self.idea_repo.like(idea_id):
            raise IdeaNotFoundError("Idea not found")

    # ============================================================
    # PEER MATCHES
    # ============================================================

    async def list_matches(self, user_id: UUID) -> List[PeerMatch]:
        return await self.match_repo.get_by_user(user_id)
