from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class IdeaCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=5000)
    category: str = Field(..., min_length=1, max_length=100)


class IdeaResponse(CamelModel):
    id: UUID
    title: str
    description: str
    category: str
    user_id: UUID
    likes: int
    created_at: datetime


class SingleIdeaResponse(CamelModel):
    idea: IdeaResponse


class IdeaListResponse(CamelModel):
    ideas: List[IdeaResponse]
