"""
Client Session

Holds who is signed in, the read cache shared with ApiClient, and a small
JSON-file key/value store standing in for browser localStorage.

State machine:
    LOADING -> AUTHENTICATED     (token verified by the API)
    LOADING -> UNAUTHENTICATED   (no token, or verification failed)
    AUTHENTICATED -> UNAUTHENTICATED   (sign_out)

A Session is created per client and passed explicitly to ApiClient and
the view layer.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

JUST_SIGNED_IN_KEY = "justSignedIn"
GOOGLE_ACCESS_TOKEN_KEY = "googleAccessToken"


class AuthState(str, Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class LocalStorage:
    """String key/value store persisted as a JSON object on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Dict[str, str] = {}
        if self.path.exists():
            try:
                self._data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Ignoring unreadable client storage {self.path}: {e}")
                self._data = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._flush()

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data), encoding="utf-8")


class Session:
    """Authentication state of one client."""

    def __init__(self, http: httpx.AsyncClient, storage: LocalStorage):
        self.http = http
        self.storage = storage
        self.state = AuthState.LOADING
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None
        # GET responses keyed by endpoint path, owned here so sign_out drops them
        self.cache: Dict[str, Any] = {}

    @property
    def is_authenticated(self) -> bool:
        return self.state == AuthState.AUTHENTICATED

    def auth_headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def restore(self, token: Optional[str]) -> AuthState:
        """
        Resolve the initial LOADING state from a previously issued token.

        One attempt only; any failure leaves the session unauthenticated.
        """
        if not token:
            self._clear()
            return self.state

        user = await self._verify(token)
        if user is None:
            self._clear()
        else:
            self.token = token
            self.user = user
            self.state = AuthState.AUTHENTICATED
        return self.state

    async def sign_in(self, id_token: str, google_access_token: Optional[str] = None) -> AuthState:
        """Verify a fresh identity token and remember the sign-in for the dashboard."""
        state = await self.restore(id_token)
        if state == AuthState.AUTHENTICATED:
            if google_access_token:
                self.storage.set(GOOGLE_ACCESS_TOKEN_KEY, google_access_token)
            self.storage.set(JUST_SIGNED_IN_KEY, "true")
        return state

    def sign_out(self) -> None:
        self._clear()
        self.storage.remove(GOOGLE_ACCESS_TOKEN_KEY)

    def consume_just_signed_in(self) -> bool:
        """True exactly once after a sign-in."""
        if self.storage.get(JUST_SIGNED_IN_KEY) is None:
            return False
        self.storage.remove(JUST_SIGNED_IN_KEY)
        return True

    @property
    def google_access_token(self) -> Optional[str]:
        return self.storage.get(GOOGLE_ACCESS_TOKEN_KEY)

    async def _verify(self, token: str) -> Optional[Dict[str, Any]]:
        try:
            response = await self.http.post("/api/auth/verify", json={"idToken": token})
        except httpx.HTTPError as e:
            logger.warning(f"Token verification request failed: {e}")
            return None
        if response.status_code != 200:
            logger.info(f"Token rejected with status {response.status_code}")
            return None
        return response.json().get("user")

    def _clear(self) -> None:
        self.state = AuthState.UNAUTHENTICATED
        self.token = None
        self.user = None
        self.cache.clear()
