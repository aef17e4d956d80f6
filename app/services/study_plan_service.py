"""
Study Plan Service

Business logic for study sessions, including AI-generated plans.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.study_plan import StudyPlan
from app.repositories.study_plan_repo import StudyPlanRepository
from app.schemas.study_plan import StudyPlanCreate, StudyPlanUpdate, StudyPlanGenerateRequest
from app.services.assistant_service import StudyAssistant

logger = logging.getLogger(__name__)


class StudyPlanNotFoundError(Exception):
    pass


class StudyPlanService:
    """Service class for study plan operations."""

    def __init__(self, db: AsyncSession):
        """Initialize with database session."""
        self.db = db
        self.plan_repo = StudyPlanRepository(db)

    # ============================================================
    # Create Plan
    # ============================================================
    async def create_plan(self, user_id: UUID, data: StudyPlanCreate) -> StudyPlan:
        return await self.plan_repo.create(
            user_id=user_id,
            completed=False,
            **data.model_dump(),
        )

    # ============================================================
    # Get User's Plans
    # ============================================================
    async def get_user_plans(self, user_id: UUID) -> List[StudyPlan]:
        return await self.plan_repo.get_by_user(user_id)

    # ============================================================
    # Update Plan
    # ============================================================
    async def update_plan(self, plan_id: UUID, user_id: UUID, data: StudyPlanUpdate) -> StudyPlan:
        """
        Update a plan owned by the user.

        Raises:
            StudyPlanNotFoundError: If plan not found or not owned by user
        """
        plan = await self.plan_repo.get_for_user(plan_id, user_id)
        if not plan:
            raise StudyPlanNotFoundError("Study plan not found")

        fields = data.model_dump(exclude_unset=True)
        # NOT NULL columns: an explicit null leaves them unchanged
        for required in ("title", "scheduled_at", "completed"):
            if fields.get(required, ...) is None:
                fields.pop(required)

        return await self.plan_repo.update(plan.id, **fields)

    # ============================================================
    # Generate Plan (AI-powered)
    # ============================================================
    async def generate_plans(
        self,
        user_id: UUID,
        request: StudyPlanGenerateRequest,
        assistant: StudyAssistant,
    ) -> List[StudyPlan]:
        """
        Ask the assistant for a plan and persist each task, one day apart
        starting now. All rows are written in one transaction.
        """
        items = await assistant.generate_study_plan(
            request.subjects,
            request.available_hours,
            request.goals,
        )

        start = datetime.now(timezone.utc)
        plans = await self.plan_repo.create_many([
            {
                "user_id": user_id,
                "title": item.title,
                "description": item.description,
                "scheduled_at": start + timedelta(days=index),
                "duration": item.duration,
                "difficulty": item.difficulty,
                "completed": False,
            }
            for index, item in enumerate(items)
        ])
        logger.info(f"Generated {len(plans)} study plans for user {user_id}")
        return plans
