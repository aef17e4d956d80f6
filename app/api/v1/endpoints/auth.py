"""
Authentication and Profile Endpoints

Endpoints:
----------
- POST /auth/verify      - Exchange an identity token for the app user
- GET  /user/profile     - Current user
- PUT  /user/profile     - Update current user
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.api.deps import get_current_user
from app.core.security import TokenVerifier, get_token_verifier
from app.models.user import User
from app.schemas.auth import VerifyTokenRequest, UserUpdateRequest, UserEnvelope
from app.schemas.common import ErrorResponse
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# ============================================================
# Router Setup
# ============================================================

router = APIRouter(tags=["Authentication"])


# ============================================================
# Verify Endpoint
# ============================================================

@router.post(
    "/auth/verify",
    response_model=UserEnvelope,
    responses={
        200: {"description": "Token verified, user resolved"},
        401: {"model": ErrorResponse, "description": "Invalid token"},
    }
)
async def verify_token(
    request_data: VerifyTokenRequest,
    verifier: TokenVerifier = Depends(get_token_verifier),
    db: AsyncSession = Depends(get_db)
):
    """
    Verify an identity token and return the matching user.

    The user is created on first sign-in; later calls with a token for
    the same identity return the same user.
    """
    claims = await verifier.verify(request_data.id_token)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    auth_service = AuthService(db)

    try:
        user = await auth_service.resolve_user(claims)
    except ValueError as e:
        logger.warning(f"Verify failed for uid {claims.uid}: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return {"user": user}


# ============================================================
# Profile Endpoints
# ============================================================

@router.get(
    "/user/profile",
    response_model=UserEnvelope,
    responses={
        200: {"description": "Current user info"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    }
)
async def get_profile(
    current_user: User = Depends(get_current_user)
):
    """
    Get current authenticated user's information.

    Requires a valid ID token in the Authorization header:
    `Authorization: Bearer <idToken>`
    """
    return {"user": current_user}


@router.put(
    "/user/profile",
    response_model=UserEnvelope,
    responses={
        200: {"description": "Profile updated"},
        400: {"model": ErrorResponse, "description": "Invalid data"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    }
)
async def update_profile(
    updates: UserUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update the current user's display name or profile image."""
    auth_service = AuthService(db)
    user = await auth_service.update_profile(current_user, updates)
    return {"user": user}
