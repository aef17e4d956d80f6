"""
Collaboration Endpoints

Endpoints:
----------
- GET  /study-groups               - Active groups, newest first
- GET  /study-groups/my            - Groups the user belongs to
- POST /study-groups               - Create a group (owner auto-joins)
- POST /study-groups/{id}/join     - Join a group
- GET  /ideas                      - Idea marketplace, newest first
- POST /ideas                      - Submit an idea
- POST /ideas/{id}/like            - Like an idea
- GET  /peer-matches               - Suggested study partners
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.idea import IdeaCreate, IdeaListResponse, SingleIdeaResponse
from app.schemas.notification import PeerMatchListResponse
from app.schemas.study_group import (
    StudyGroupCreate,
    StudyGroupListResponse,
    SingleStudyGroupResponse,
)
from app.services.collaboration_service import (
    CollaborationService,
    StudyGroupNotFoundError,
    IdeaNotFoundError,
)

# ============================================================
# Router Setup
# ============================================================
router = APIRouter(tags=["Collaboration"])


def get_collaboration_service(db: AsyncSession = Depends(get_db)) -> CollaborationService:
    return CollaborationService(db)


# ============================================================
# Study Groups
# ============================================================

@router.get("/study-groups", response_model=StudyGroupListResponse)
async def list_study_groups(
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    groups = await service.list_groups()
    return {"groups": groups}


@router.get("/study-groups/my", response_model=StudyGroupListResponse)
async def list_my_study_groups(
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    groups = await service.list_user_groups(current_user.id)
    return {"groups": groups}


@router.post("/study-groups", response_model=SingleStudyGroupResponse)
async def create_study_group(
    group_data: StudyGroupCreate,
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    """
    Create a study group.

    The caller owns the group and is its first member.
    """
    group = await service.create_group(current_user.id, group_data)
    return {"group": group}


@router.post("/study-groups/{group_id}/join", response_model=MessageResponse)
async def join_study_group(
    group_id: UUID,
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    try:
        await service.join_group(group_id, current_user.id)
    except StudyGroupNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Joined study group successfully"}


# ============================================================
# Ideas
# ============================================================

@router.get("/ideas", response_model=IdeaListResponse)
async def list_ideas(
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    ideas = await service.list_ideas()
    return {"ideas": ideas}


@router.post("/ideas", response_model=SingleIdeaResponse)
async def create_idea(
    idea_data: IdeaCreate,
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    idea = await service.create_idea(current_user.id, idea_data)
    return {"idea": idea}


@router.post("/ideas/{idea_id}/like", response_model=MessageResponse)
async def like_idea(
    idea_id: UUID,
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    try:
        await service.like_idea(idea_id)
    except IdeaNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Idea liked successfully"}


# ============================================================
# Peer Matches
# ============================================================

@router.get("/peer-matches", response_model=PeerMatchListResponse)
async def list_peer_matches(
    current_user: User = Depends(get_current_user),
    service: CollaborationService = Depends(get_collaboration_service),
):
    matches = await service.list_matches(current_user.id)
    return {"matches": matches}
