from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, JSON, Uuid, false
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from .base import BaseModel


class Quiz(BaseModel):
    __tablename__ = "quizzes"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)

    # Quiz info
    title = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)

    # [{"question": "...", "options": [4 x str], "correctAnswer": 0-3, "explanation": "..."}]
    questions = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)

    # Result
    score = Column(Integer, nullable=True)
    total_questions = Column(Integer, nullable=False)
    completed = Column(Boolean, default=False, server_default=false(), nullable=False)

    user = relationship("User", back_populates="quizzes")
