from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.models.study_plan import PlanDifficulty
from app.schemas.common import CamelModel


def _normalize_difficulty(value: Any) -> Any:
    # Accept "low" / "HIGH" etc. from clients and the model
    if isinstance(value, str):
        return value.strip().capitalize()
    return value


# ============================================================
# Request Schemas (What client sends)
# ============================================================

class StudyPlanCreate(CamelModel):
    """Schema for creating a study session."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    scheduled_at: datetime
    duration: Optional[int] = Field(None, gt=0, description="Length in minutes")
    difficulty: Optional[PlanDifficulty] = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return _normalize_difficulty(value)

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Linear algebra review",
                "description": "Eigenvalues and eigenvectors",
                "scheduledAt": "2025-03-01T18:00:00Z",
                "duration": 60,
                "difficulty": "Medium",
            }
        }
    }


class StudyPlanUpdate(CamelModel):
    """Schema for updating a study session; only sent fields change."""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    scheduled_at: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    difficulty: Optional[PlanDifficulty] = None
    completed: Optional[bool] = None

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return _normalize_difficulty(value)


class StudyPlanGenerateRequest(CamelModel):
    """Inputs for an AI-generated plan."""

    subjects: List[str] = Field(..., min_length=1)
    available_hours: float = Field(..., gt=0, description="Study hours per week")
    goals: List[str] = Field(default_factory=list)


# ============================================================
# Assistant output
# ============================================================

class StudyPlanItem(CamelModel):
    """One task of a generated plan."""

    title: str = Field(..., min_length=1)
    description: str = ""
    duration: int = Field(..., gt=0)
    difficulty: PlanDifficulty
    priority: int = 1

    @field_validator("difficulty", mode="before")
    @classmethod
    def normalize_difficulty(cls, value):
        return _normalize_difficulty(value)


# ============================================================
# Response Schemas (What server sends back)
# ============================================================

class StudyPlanResponse(CamelModel):
    id: UUID
    user_id: UUID
    title: str
    description: Optional[str] = None
    scheduled_at: datetime
    duration: Optional[int] = None
    difficulty: Optional[PlanDifficulty] = None
    completed: bool
    created_at: datetime


class SingleStudyPlanResponse(CamelModel):
    plan: StudyPlanResponse


class StudyPlanListResponse(CamelModel):
    plans: List[StudyPlanResponse]
