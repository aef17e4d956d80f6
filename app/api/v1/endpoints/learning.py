"""
Learning Endpoints

AI explanations, performance analysis and the Google Classroom proxy.

Endpoints:
----------
- POST /learning-buddy/explain  - Explain a concept
- GET  /analytics/performance   - Textual study performance report
- GET  /classroom/assignments   - Upcoming Classroom assignments
"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.assistant import (
    ExplainRequest,
    ExplanationResponse,
    AnalysisResponse,
    AssignmentListResponse,
)
from app.services.analytics_service import AnalyticsService
from app.services.assistant_service import StudyAssistant, AssistantError, get_study_assistant
from app.services.classroom_service import (
    ClassroomService,
    ClassroomServiceError,
    get_classroom_http_client,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Learning"])


# ============================================================
# LEARNING BUDDY
# ============================================================

@router.post(
    "/learning-buddy/explain",
    response_model=ExplanationResponse,
    summary="Explain a concept in plain language",
)
async def explain_concept(
    request: ExplainRequest,
    current_user: User = Depends(get_current_user),
    assistant: StudyAssistant = Depends(get_study_assistant),
):
    try:
        explanation = await assistant.explain_concept(request.concept, request.context)
    except AssistantError as e:
        logger.error(f"Explanation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to explain concept",
        )
    return {"explanation": explanation}


# ============================================================
# ANALYTICS
# ============================================================

@router.get(
    "/analytics/performance",
    response_model=AnalysisResponse,
    summary="Analyze completed quizzes and planned study time",
)
async def analyze_performance(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    assistant: StudyAssistant = Depends(get_study_assistant),
):
    try:
        analysis = await AnalyticsService(db).analyze_performance(current_user.id, assistant)
    except AssistantError as e:
        logger.error(f"Performance analysis failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze performance",
        )
    return {"analysis": analysis}


# ============================================================
# GOOGLE CLASSROOM
# ============================================================

@router.get(
    "/classroom/assignments",
    response_model=AssignmentListResponse,
    summary="List Classroom assignments with a due date",
    description="""
    Reads the caller's Google Classroom with the supplied OAuth access
    token. A failed fetch is reported as an error, never as an empty list.
    """,
)
async def list_assignments(
    access_token: Optional[str] = Query(None, alias="accessToken"),
    current_user: User = Depends(get_current_user),
    http_client: httpx.AsyncClient = Depends(get_classroom_http_client),
):
    if not access_token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Access token required",
        )

    service = ClassroomService(access_token, http_client)
    try:
        assignments = await service.get_assignments()
    except ClassroomServiceError as e:
        logger.error(f"Classroom fetch failed for user {current_user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch classroom assignments",
        )
    return {"assignments": assignments}
