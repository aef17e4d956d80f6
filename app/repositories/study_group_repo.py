"""
Study Group Repository

Data access layer for StudyGroup and StudyGroupMember models.

Group creation and joining touch two tables each; both run as a
single transaction.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update

from app.repositories.base import BaseRepository
from app.models.study_group import StudyGroup, StudyGroupMember


class StudyGroupRepository(BaseRepository[StudyGroup]):
    """Repository for StudyGroup model."""

    def __init__(self, db: AsyncSession):
        super().__init__(StudyGroup, db)

    async def get_active(self) -> List[StudyGroup]:
        stmt = (
            select(self.model)
            .where(self.model.is_active.is_(True))
            .order_by(self.model.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_member(self, user_id: UUID) -> List[StudyGroup]:
        """Active groups the user belongs to (owned or joined)."""
        member_groups = (
            select(StudyGroupMember.group_id)
            .where(StudyGroupMember.user_id == user_id)
        )
        stmt = (
            select(self.model)
            .where(
                self.model.id.in_(member_groups),
                self.model.is_active.is_(True)
            )
            .order_by(self.model.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_active_by_id(self, group_id: UUID) -> Optional[StudyGroup]:
        stmt = (
            select(self.model)
            .where(
                self.model.id == group_id,
                self.model.is_active.is_(True)
            )
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_with_owner(
        self,
        owner_id: UUID,
        name: str,
        subject: str,
        description: Optional[str] = None,
    ) -> StudyGroup:
        """Create a group and its owner's membership row together."""
        group = StudyGroup(
            name=name,
            subject=subject,
            description=description,
            owner_id=owner_id,
            members_count=1,
            is_active=True,
        )
        self.db.add(group)
        await self.db.flush()

        self.db.add(StudyGroupMember(group_id=group.id, user_id=owner_id))

        await self.db.commit()
        await self.db.refresh(group)
        return group

    async def join(self, group_id: UUID, user_id: UUID) -> StudyGroupMember:
        """Add a member row and bump members_count relative to the stored value."""
        member = StudyGroupMember(group_id=group_id, user_id=user_id)
        self.db.add(member)
        await self.db.flush()

        await self.db.execute(
            update(StudyGroup)
            .where(StudyGroup.id == group_id)
            .values(members_count=StudyGroup.members_count + 1)
        )

        await self.db.commit()
        await self.db.refresh(member)
        return member
