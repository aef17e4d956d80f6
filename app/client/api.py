"""
API Client

Thin wrapper over httpx.AsyncClient for the Campus Hub API.

- Adds the session's bearer token to every request.
- GET responses are cached per endpoint path until invalidated.
- Mutations wait for the server, then invalidate the paths whose
  data they change.
- Non-2xx responses raise ApiError carrying the server's message.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from app.client.session import Session

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


# Paths dropped from the cache after each kind of mutation
STUDY_PLAN_PATHS = ("/api/study-plans",)
QUIZ_PATHS = ("/api/quizzes",)
QUIZ_COMPLETE_PATHS = ("/api/quizzes", "/api/user/profile", "/api/notifications")
GROUP_PATHS = ("/api/study-groups", "/api/study-groups/my")
IDEA_PATHS = ("/api/ideas",)
PROFILE_PATHS = ("/api/user/profile",)
NOTIFICATION_PATHS = ("/api/notifications",)


class ApiClient:
    def __init__(self, session: Session):
        self.session = session

    @property
    def http(self) -> httpx.AsyncClient:
        return self.session.http

    # ============================================================
    # CACHE
    # ============================================================

    def invalidate(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.session.cache.pop(path, None)

    async def get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        """Cached GET; the cache key is the path alone."""
        if path in self.session.cache:
            return self.session.cache[path]
        data = await self._request("GET", path, params=params)
        self.session.cache[path] = data
        return data

    async def mutate(
        self,
        method: str,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        invalidates: Iterable[str] = (),
    ) -> Any:
        data = await self._request(method, path, json=body if body is not None else {})
        self.invalidate(invalidates)
        return data

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self.http.request(
            method, path, headers=self.session.auth_headers(), **kwargs
        )
        if response.is_success:
            return response.json()

        try:
            message = response.json().get("message") or response.reason_phrase
        except ValueError:
            message = response.text or response.reason_phrase
        logger.debug(f"{method} {path} failed with {response.status_code}: {message}")
        raise ApiError(response.status_code, message)

    # ============================================================
    # PROFILE
    # ============================================================

    async def get_profile(self) -> Dict[str, Any]:
        return (await self.get("/api/user/profile"))["user"]

    async def update_profile(self, **fields) -> Dict[str, Any]:
        data = await self.mutate("PUT", "/api/user/profile", fields, PROFILE_PATHS)
        return data["user"]

    # ============================================================
    # STUDY PLANS
    # ============================================================

    async def list_study_plans(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/study-plans"))["plans"]

    async def create_study_plan(self, plan: Dict[str, Any]) -> Dict[str, Any]:
        data = await self.mutate("POST", "/api/study-plans", plan, STUDY_PLAN_PATHS)
        return data["plan"]

    async def generate_study_plans(
        self, subjects: List[str], available_hours: float, goals: Optional[List[str]] = None
    ) -> List[Dict[str, Any]]:
        body = {"subjects": subjects, "availableHours": available_hours, "goals": goals or []}
        data = await self.mutate("POST", "/api/study-plans/generate", body, STUDY_PLAN_PATHS)
        return data["plans"]

    async def update_study_plan(self, plan_id: str, **fields) -> Dict[str, Any]:
        data = await self.mutate("PUT", f"/api/study-plans/{plan_id}", fields, STUDY_PLAN_PATHS)
        return data["plan"]

    # ============================================================
    # QUIZZES
    # ============================================================

    async def list_quizzes(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/quizzes"))["quizzes"]

    async def generate_quiz(
        self, subject: str, difficulty: str = "Intermediate", num_questions: int = 5
    ) -> Dict[str, Any]:
        body = {"subject": subject, "difficulty": difficulty, "numQuestions": num_questions}
        data = await self.mutate("POST", "/api/quizzes/generate", body, QUIZ_PATHS)
        return data["quiz"]

    async def complete_quiz(self, quiz_id: str, score: int) -> Dict[str, Any]:
        data = await self.mutate(
            "PUT", f"/api/quizzes/{quiz_id}/complete", {"score": score}, QUIZ_COMPLETE_PATHS
        )
        return data["quiz"]

    # ============================================================
    # COLLABORATION
    # ============================================================

    async def list_study_groups(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/study-groups"))["groups"]

    async def list_my_study_groups(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/study-groups/my"))["groups"]

    async def create_study_group(self, group: Dict[str, Any]) -> Dict[str, Any]:
        data = await self.mutate("POST", "/api/study-groups", group, GROUP_PATHS)
        return data["group"]

    async def join_study_group(self, group_id: str) -> str:
        data = await self.mutate("POST", f"/api/study-groups/{group_id}/join", None, GROUP_PATHS)
        return data["message"]

    async def list_ideas(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/ideas"))["ideas"]

    async def create_idea(self, idea: Dict[str, Any]) -> Dict[str, Any]:
        data = await self.mutate("POST", "/api/ideas", idea, IDEA_PATHS)
        return data["idea"]

    async def like_idea(self, idea_id: str) -> str:
        data = await self.mutate("POST", f"/api/ideas/{idea_id}/like", None, IDEA_PATHS)
        return data["message"]

    async def list_peer_matches(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/peer-matches"))["matches"]

    # ============================================================
    # NOTIFICATIONS
    # ============================================================

    async def list_notifications(self) -> List[Dict[str, Any]]:
        return (await self.get("/api/notifications"))["notifications"]

    async def mark_notification_read(self, notification_id: str) -> str:
        data = await self.mutate(
            "PUT", f"/api/notifications/{notification_id}/read", None, NOTIFICATION_PATHS
        )
        return data["message"]

    # ============================================================
    # LEARNING
    # ============================================================

    async def explain_concept(self, concept: str, context: Optional[str] = None) -> str:
        body: Dict[str, Any] = {"concept": concept}
        if context:
            body["context"] = context
        data = await self.mutate("POST", "/api/learning-buddy/explain", body)
        return data["explanation"]

    async def analyze_performance(self) -> str:
        return (await self.get("/api/analytics/performance"))["analysis"]

    async def list_classroom_assignments(self) -> List[Dict[str, Any]]:
        token = self.session.google_access_token
        if not token:
            raise ApiError(400, "Access token required")
        # Not cached: the result depends on the Google token, not just the path
        data = await self._request("GET", "/api/classroom/assignments", params={"accessToken": token})
        return data["assignments"]
