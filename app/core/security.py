"""
Identity verification.

Bearer tokens are ID tokens issued by Firebase Authentication. Checking
them is delegated to the Firebase Admin SDK behind the small TokenVerifier
interface, so the rest of the app (and the tests) never touch the SDK.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials

from app.core.config import settings

logger = logging.getLogger(__name__)


# =====================================================
# Claims
# =====================================================
@dataclass(frozen=True)
class Claims:
    """Decoded identity assertions from a verified token."""
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None

    @property
    def display_name(self) -> Optional[str]:
        """Name claim, falling back to the local part of the email."""
        if self.name:
            return self.name
        if self.email:
            return self.email.split("@")[0]
        return None


class TokenVerifier(Protocol):
    """Anything that can turn a bearer token into claims."""

    async def verify(self, token: str) -> Optional[Claims]:
        """Return claims for a valid token, None for anything else."""
        ...


# =====================================================
# Firebase implementation
# =====================================================
_firebase_app: Optional[firebase_admin.App] = None


def _ensure_firebase() -> firebase_admin.App:
    """Initialize Firebase Admin SDK once."""
    global _firebase_app
    if _firebase_app is not None:
        return _firebase_app

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    key_path = settings.FIREBASE_SERVICE_ACCOUNT_KEY_PATH
    if key_path:
        cred = credentials.Certificate(key_path)
    else:
        cred = credentials.ApplicationDefault()

    _firebase_app = firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Admin SDK initialized")
    return _firebase_app


class FirebaseTokenVerifier:
    """TokenVerifier backed by firebase_admin.auth.verify_id_token."""

    async def verify(self, token: str) -> Optional[Claims]:
        if not token:
            return None

        try:
            app = _ensure_firebase()
            # The SDK call is blocking (it may fetch signing keys)
            decoded = await asyncio.to_thread(firebase_auth.verify_id_token, token, app)
        except Exception as e:
            logger.warning(f"Token verification failed: {e}")
            return None

        return Claims(
            uid=decoded["uid"],
            email=decoded.get("email"),
            name=decoded.get("name"),
            picture=decoded.get("picture"),
        )


_verifier: Optional[FirebaseTokenVerifier] = None


def get_token_verifier() -> TokenVerifier:
    """
    Dependency returning the process-wide verifier.

    Tests replace it through app.dependency_overrides.
    """
    global _verifier
    if _verifier is None:
        _verifier = FirebaseTokenVerifier()
    return _verifier
