from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.common import CamelModel


# ============================================================
# Request Schemas (What client sends)
# ============================================================

class VerifyTokenRequest(CamelModel):
    """Schema for exchanging an identity token for the app user"""

    id_token: str = Field(min_length=1, description="Identity provider ID token")

    model_config = {
        "json_schema_extra": {
            "example": {"idToken": "eyJhbGciOiJSUzI1NiIsImtpZCI6..."}
        }
    }


class UserUpdateRequest(CamelModel):
    """Schema for updating the current user's profile"""

    name: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Display name"
    )
    profile_image: Optional[str] = Field(
        None,
        max_length=1000,
        description="Profile image URL"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Remove extra whitespace from name"""
        if v is None:
            return None
        normalized = " ".join(v.split())
        if not normalized:
            raise ValueError("Name cannot be empty")
        return normalized


# ============================================================
# Response Schemas (What server sends back)
# ============================================================

class UserResponse(CamelModel):
    """Schema for user data in responses"""

    id: UUID
    email: str
    name: str
    profile_image: Optional[str] = None
    firebase_uid: str
    study_streak: int = 0
    study_points: int = 0
    collaboration_score: int = 0
    created_at: datetime
    updated_at: datetime


class UserEnvelope(CamelModel):
    user: UserResponse
