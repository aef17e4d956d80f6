from sqlalchemy import Column, String, Integer, DateTime, func
from sqlalchemy.orm import relationship
from .base import BaseModel, utc_now


class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    profile_image = Column(String(1000), nullable=True)
    firebase_uid = Column(String(128), unique=True, nullable=False, index=True)

    # Gamification counters, only ever changed by relative SQL updates
    study_streak = Column(Integer, default=0, server_default="0", nullable=False)
    study_points = Column(Integer, default=0, server_default="0", nullable=False)
    collaboration_score = Column(Integer, default=0, server_default="0", nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False
    )

    # Relationships - User OWNS these
    study_plans = relationship("StudyPlan", back_populates="user")
    quizzes = relationship("Quiz", back_populates="user")
    owned_groups = relationship("StudyGroup", back_populates="owner")
    ideas = relationship("Idea", back_populates="user")
    notifications = relationship("Notification", back_populates="user")
