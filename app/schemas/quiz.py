"""
Quiz Schemas

Pydantic models for quiz-related API requests and responses, plus the
question shape the assistant must produce.
"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


# ============================================================
# Question shape (stored as JSON on the quiz row)
# ============================================================

class QuizQuestion(CamelModel):
    """A multiple-choice question with exactly four options."""
    question: str = Field(..., min_length=1)
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_answer: int = Field(..., ge=0, le=3, description="Index into options")
    explanation: str = ""


# ============================================================
# Request Schemas
# ============================================================

class QuizGenerateRequest(CamelModel):
    """Request to generate a quiz for a subject."""
    subject: str = Field(..., min_length=1, max_length=255)
    difficulty: str = Field(
        default="Intermediate",
        min_length=1,
        max_length=50,
        description="Free-form level, e.g. Beginner / Intermediate / Advanced"
    )
    num_questions: int = Field(
        default=5,
        ge=1,
        le=20,
        description="Number of questions to generate"
    )


class QuizCompleteRequest(CamelModel):
    """Number of questions the user answered correctly."""
    score: int = Field(..., ge=0)


# ============================================================
# Response Schemas
# ============================================================

class QuizResponse(CamelModel):
    """Quiz row returned to the client."""
    id: UUID
    user_id: UUID
    title: str
    subject: str
    questions: List[QuizQuestion]
    score: Optional[int] = None
    total_questions: int
    completed: bool
    created_at: datetime


class SingleQuizResponse(CamelModel):
    quiz: QuizResponse


class QuizListResponse(CamelModel):
    quizzes: List[QuizResponse]
