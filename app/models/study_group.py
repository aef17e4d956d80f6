from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Text, DateTime, Uuid, func, true
from sqlalchemy.orm import relationship
from .base import BaseModel, utc_now


class StudyGroup(BaseModel):
    __tablename__ = "study_groups"

    name = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    owner_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)

    # Owner is auto-joined, so a new group starts at 1
    members_count = Column(Integer, default=1, server_default="1", nullable=False)
    is_active = Column(Boolean, default=True, server_default=true(), nullable=False)

    owner = relationship("User", back_populates="owned_groups")
    members = relationship("StudyGroupMember", back_populates="group")


class StudyGroupMember(BaseModel):
    __tablename__ = "study_group_members"

    group_id = Column(Uuid(as_uuid=True), ForeignKey("study_groups.id"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    joined_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False
    )

    group = relationship("StudyGroup", back_populates="members")
