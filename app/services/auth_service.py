import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import Claims
from app.models import User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import UserUpdateRequest

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service class for identity-to-user resolution and profile updates.

    """
    def __init__(self, db: AsyncSession):
        """
        Initialize with database session.

        Args:
            db: AsyncSession instance
        """
        self.db = db
        self.user_repo = UserRepository(db)

    # ============================================================
    # Lookup-or-create
    # ============================================================
    async def resolve_user(self, claims: Claims) -> User:
        """
        Return the user bound to the token's uid, creating it on first sight.

        Args:
            claims: Verified identity claims

        Returns:
            User object (same row for every call with the same uid)

        Raises:
            ValueError: If a new user would have no email
        """
        user = await self.user_repo.get_by_firebase_uid(claims.uid)
        if user:
            return user

        if not claims.email:
            raise ValueError("Token has no email claim")

        try:
            user = await self.user_repo.create_user(
                firebase_uid=claims.uid,
                email=claims.email,
                name=claims.display_name,
                profile_image=claims.picture,
            )
            logger.info(f"Created user {user.id} for uid {claims.uid}")
            return user
        except IntegrityError:
            # Another request created the row first
            await self.db.rollback()
            user = await self.user_repo.get_by_firebase_uid(claims.uid)
            if user is None:
                raise ValueError("Email already registered to another account")
            return user

    # ============================================================
    # Profile
    # ============================================================
    async def update_profile(self, user: User, updates: UserUpdateRequest) -> User:
        """Apply only the fields the client sent."""
        fields = updates.model_dump(exclude_unset=True, exclude_none=True)
        if not fields:
            return user
        return await self.user_repo.update_user(user.id, **fields)
