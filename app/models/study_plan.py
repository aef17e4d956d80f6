from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Text, DateTime, Enum, Uuid, false
from sqlalchemy.orm import relationship
import enum
from .base import BaseModel


class PlanDifficulty(enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class StudyPlan(BaseModel):
    __tablename__ = "study_plans"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=False, index=True)
    duration = Column(Integer, nullable=True)  # minutes
    difficulty = Column(
        Enum(
            PlanDifficulty,
            name="plan_difficulty",
            values_callable=lambda x: [e.value for e in x]
        ),
        nullable=True
    )
    completed = Column(Boolean, default=False, server_default=false(), nullable=False)

    user = relationship("User", back_populates="study_plans")
