from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


class StudyGroupCreate(CamelModel):
    """Schema for creating a study group. The caller becomes the owner."""

    name: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)

    @field_validator("name", "subject")
    @classmethod
    def normalize_text(cls, value: str) -> str:
        """Trim whitespace and ensure the value is not empty."""
        normalized = " ".join(value.split())
        if not normalized:
            raise ValueError("Value cannot be empty")
        return normalized


class StudyGroupResponse(CamelModel):
    id: UUID
    name: str
    subject: str
    description: Optional[str] = None
    owner_id: UUID
    members_count: int
    is_active: bool
    created_at: datetime


class SingleStudyGroupResponse(CamelModel):
    group: StudyGroupResponse


class StudyGroupListResponse(CamelModel):
    groups: List[StudyGroupResponse]
