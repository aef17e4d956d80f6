"""
Quiz Endpoints

HTTP API for quiz generation and completion.

Endpoints:
----------
- GET  /quizzes                    - List the user's quizzes
- POST /quizzes/generate           - Generate and save a quiz
- PUT  /quizzes/{quiz_id}/complete - Record a score and award points
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.quiz import (
    QuizGenerateRequest,
    QuizCompleteRequest,
    QuizListResponse,
    SingleQuizResponse,
)
from app.services.assistant_service import StudyAssistant, AssistantError, get_study_assistant
from app.services.quiz_service import (
    QuizService,
    QuizServiceError,
    QuizNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizzes", tags=["Quizzes"])


def get_quiz_service(db: AsyncSession = Depends(get_db)) -> QuizService:
    return QuizService(db)


# ============================================================
# LIST QUIZZES
# ============================================================

@router.get(
    "",
    response_model=QuizListResponse,
    summary="List the user's quizzes, newest first",
)
async def list_quizzes(
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
):
    quizzes = await service.list_quizzes(current_user.id)
    return {"quizzes": quizzes}


# ============================================================
# GENERATE QUIZ
# ============================================================

@router.post(
    "/generate",
    response_model=SingleQuizResponse,
    summary="Generate a quiz for a subject",
    description="""
    Uses AI to write multiple-choice questions (four options each)
    for the subject at the requested level, then saves them as a quiz.
    """,
)
async def generate_quiz(
    request: QuizGenerateRequest,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
    assistant: StudyAssistant = Depends(get_study_assistant),
):
    try:
        quiz = await service.generate_quiz(current_user.id, request, assistant)
    except AssistantError as e:
        logger.error(f"Quiz generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate quiz",
        )
    return {"quiz": quiz}


# ============================================================
# COMPLETE QUIZ
# ============================================================

@router.put(
    "/{quiz_id}/complete",
    response_model=SingleQuizResponse,
    summary="Record a quiz score",
    description="Marks the quiz completed and awards 10 study points per correct answer.",
)
async def complete_quiz(
    quiz_id: UUID,
    submission: QuizCompleteRequest,
    current_user: User = Depends(get_current_user),
    service: QuizService = Depends(get_quiz_service),
):
    try:
        quiz = await service.complete_quiz(quiz_id, current_user, submission.score)
    except QuizNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quiz not found",
        )
    except QuizServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    return {"quiz": quiz}
