"""
Quiz Service

Business logic for quiz operations:
- AI-powered quiz generation for a subject
- Quiz completion: score, study points and a notification in one transaction
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.notification import Notification
from app.models.quiz import Quiz
from app.models.user import User
from app.repositories.quiz_repo import QuizRepository
from app.repositories.user_repo import UserRepository
from app.schemas.quiz import QuizGenerateRequest
from app.services.assistant_service import StudyAssistant

logger = logging.getLogger(__name__)


class QuizServiceError(Exception):
    pass


class QuizNotFoundError(QuizServiceError):
    pass


class QuizService:
    """Service for quiz generation and completion."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.quiz_repo = QuizRepository(db)
        self.user_repo = UserRepository(db)

    # ============================================================
    # GENERATE QUIZ (AI-powered)
    # ============================================================

    async def generate_quiz(
        self,
        user_id: UUID,
        request: QuizGenerateRequest,
        assistant: StudyAssistant,
    ) -> Quiz:
        """
        Generate questions and persist them as a new quiz.

        Raises:
            AssistantError: if the model output is unusable
        """
        questions = await assistant.generate_quiz(
            request.subject,
            request.difficulty,
            request.num_questions,
        )

        quiz = await self.quiz_repo.create(
            user_id=user_id,
            title=f"{request.subject} Quiz",
            subject=request.subject,
            questions=[q.model_dump(by_alias=True) for q in questions],
            total_questions=len(questions),
            completed=False,
        )
        logger.info(f"Generated quiz {quiz.id} ({quiz.total_questions} questions) for user {user_id}")
        return quiz

    # ============================================================
    # LIST QUIZZES
    # ============================================================

    async def list_quizzes(self, user_id: UUID) -> List[Quiz]:
        return await self.quiz_repo.get_by_user(user_id)

    # ============================================================
    # COMPLETE QUIZ
    # ============================================================

    async def complete_quiz(self, quiz_id: UUID, user: User, score: int) -> Quiz:
        """
        Record a score and award score * POINTS_PER_CORRECT_ANSWER points.

        The quiz update, the point award and the notification commit
        together or not at all.

        Raises:
            QuizNotFoundError: unknown quiz or owned by someone else
            QuizServiceError: score out of range or quiz already completed
        """
        quiz = await self.quiz_repo.get_for_user(quiz_id, user.id)
        if not quiz:
            raise QuizNotFoundError("Quiz not found")

        if quiz.completed:
            raise QuizServiceError("Quiz already completed")

        if score > quiz.total_questions:
            raise QuizServiceError(
                f"Score {score} exceeds the quiz's {quiz.total_questions} questions"
            )

        points = score * settings.POINTS_PER_CORRECT_ANSWER

        try:
            # Only the request that flips the flag awards points
            if not await self.quiz_repo.mark_completed(quiz.id, user.id, score):
                raise QuizServiceError("Quiz already completed")
            await self.user_repo.add_study_points(user.id, points)
            self.db.add(
                Notification(
                    user_id=user.id,
                    title=f"Quiz Complete: {quiz.title}",
                    message=f"You scored {score}/{quiz.total_questions} and earned {points} points!",
                    type="quiz_completed",
                )
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(quiz)
        return quiz
