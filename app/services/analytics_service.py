"""
Analytics Service

Builds the textual performance report from completed quizzes and the
total planned study time.
"""

from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.quiz_repo import QuizRepository
from app.repositories.study_plan_repo import StudyPlanRepository
from app.services.assistant_service import StudyAssistant


class AnalyticsService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.quiz_repo = QuizRepository(db)
        self.plan_repo = StudyPlanRepository(db)

    async def collect_inputs(self, user_id: UUID) -> tuple[List[Dict[str, Any]], float]:
        """Completed quiz summaries and planned study hours."""
        quizzes = await self.quiz_repo.get_completed_by_user(user_id)
        plans = await self.plan_repo.get_by_user(user_id)

        results = [
            {
                "title": q.title,
                "subject": q.subject,
                "score": q.score,
                "totalQuestions": q.total_questions,
            }
            for q in quizzes
        ]
        study_hours = sum(p.duration or 0 for p in plans) / 60
        return results, study_hours

    async def analyze_performance(self, user_id: UUID, assistant: StudyAssistant) -> str:
        results, study_hours = await self.collect_inputs(user_id)
        return await assistant.analyze_performance(results, study_hours)
