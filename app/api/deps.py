from fastapi import HTTPException, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from app.db.database import get_db
from app.models import User
from app.core.security import TokenVerifier, get_token_verifier
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI; missing headers are reported by us, not FastAPI
security = HTTPBearer(auto_error=False)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"}
    )


# =====================================================
# Get Current user
# =====================================================
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Dependency that verifies the bearer ID token and returns the app user,
    creating the user on first sight of the identity.

    Raises:
        HTTPException 401: If token is missing, invalid or expired
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("No token provided")

    claims = await verifier.verify(credentials.credentials)
    if claims is None:
        raise _unauthorized("Invalid token")

    auth_service = AuthService(db)

    try:
        return await auth_service.resolve_user(claims)
    except ValueError as e:
        logger.warning(f"Authentication failed for uid {claims.uid}: {e}")
        raise _unauthorized("Authentication failed")
