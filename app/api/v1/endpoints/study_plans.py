"""
Study Plan Endpoints

Endpoints:
----------
- GET  /study-plans            - List the user's study sessions
- POST /study-plans            - Create a study session
- POST /study-plans/generate   - AI-generate and save a batch of sessions
- PUT  /study-plans/{plan_id}  - Update a session (e.g. mark completed)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.study_plan import (
    StudyPlanCreate,
    StudyPlanUpdate,
    StudyPlanGenerateRequest,
    SingleStudyPlanResponse,
    StudyPlanListResponse,
)
from app.services.assistant_service import StudyAssistant, AssistantError, get_study_assistant
from app.services.study_plan_service import StudyPlanService, StudyPlanNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/study-plans", tags=["Study Plans"])


def get_study_plan_service(db: AsyncSession = Depends(get_db)) -> StudyPlanService:
    return StudyPlanService(db)


@router.get("", response_model=StudyPlanListResponse)
async def list_study_plans(
    current_user: User = Depends(get_current_user),
    service: StudyPlanService = Depends(get_study_plan_service),
):
    """List the user's sessions, latest scheduled first."""
    plans = await service.get_user_plans(current_user.id)
    return {"plans": plans}


@router.post("", response_model=SingleStudyPlanResponse)
async def create_study_plan(
    plan_data: StudyPlanCreate,
    current_user: User = Depends(get_current_user),
    service: StudyPlanService = Depends(get_study_plan_service),
):
    plan = await service.create_plan(current_user.id, plan_data)
    return {"plan": plan}


@router.post(
    "/generate",
    response_model=StudyPlanListResponse,
    summary="Generate a study plan with AI",
    description="""
    Asks the assistant for a task list covering the subjects and goals,
    then saves each task as a session, one day apart starting now.
    """,
)
async def generate_study_plan(
    request: StudyPlanGenerateRequest,
    current_user: User = Depends(get_current_user),
    service: StudyPlanService = Depends(get_study_plan_service),
    assistant: StudyAssistant = Depends(get_study_assistant),
):
    try:
        plans = await service.generate_plans(current_user.id, request, assistant)
    except AssistantError as e:
        logger.error(f"Study plan generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate study plan",
        )
    return {"plans": plans}


@router.put("/{plan_id}", response_model=SingleStudyPlanResponse)
async def update_study_plan(
    plan_id: UUID,
    updates: StudyPlanUpdate,
    current_user: User = Depends(get_current_user),
    service: StudyPlanService = Depends(get_study_plan_service),
):
    try:
        plan = await service.update_plan(plan_id, current_user.id, updates)
    except StudyPlanNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Study plan not found",
        )
    return {"plan": plan}
