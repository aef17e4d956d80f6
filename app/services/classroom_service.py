"""
Google Classroom Service

Lists the caller's courses, then each course's course work, keeps the
items that have a due date and returns them flattened and sorted by
due date.

Failures are raised as ClassroomServiceError rather than hidden behind
an empty list, so "no assignments" and "fetch failed" stay distinct.
"""

import logging
from datetime import date
from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx

from app.core.config import settings
from app.schemas.assistant import ClassroomAssignment

logger = logging.getLogger(__name__)


class ClassroomServiceError(Exception):
    """The Classroom API could not be read."""
    pass


class ClassroomService:
    """Read-only view of a student's Google Classroom."""

    def __init__(self, access_token: str, http_client: httpx.AsyncClient):
        self.access_token = access_token
        self.http = http_client
        self.base_url = settings.CLASSROOM_API_BASE_URL.rstrip("/")

    # ============================================================
    # COURSES
    # ============================================================

    async def list_courses(self) -> List[Dict[str, Any]]:
        return await self._list_all("/courses", "courses", {"studentId": "me"})

    # ============================================================
    # ASSIGNMENTS
    # ============================================================

    async def get_assignments(self) -> List[ClassroomAssignment]:
        """
        Course work with a due date across all of the student's courses.

        Raises:
            ClassroomServiceError: on any HTTP or transport failure
        """
        assignments: List[ClassroomAssignment] = []

        for course in await self.list_courses():
            course_work = await self._list_all(
                f"/courses/{course['id']}/courseWork", "courseWork"
            )
            for work in course_work:
                due = _parse_due_date(work.get("dueDate"))
                if due is None:
                    continue
                assignments.append(
                    ClassroomAssignment(
                        id=work["id"],
                        title=work.get("title", ""),
                        description=work.get("description") or "",
                        due_date=due,
                        course_name=course.get("name", ""),
                    )
                )

        return sorted(assignments, key=lambda a: a.due_date)

    # ============================================================
    # PRIVATE HELPERS
    # ============================================================

    async def _list_all(
        self,
        path: str,
        items_key: str,
        params: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        """GET every page of a list endpoint, following nextPageToken."""
        items: List[Dict[str, Any]] = []
        query = dict(params or {})

        while True:
            try:
                response = await self.http.get(
                    f"{self.base_url}{path}",
                    params=query,
                    headers={"Authorization": f"Bearer {self.access_token}"},
                )
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                logger.error(f"Classroom API returned {e.response.status_code} for {path}")
                raise ClassroomServiceError(f"Classroom API error {e.response.status_code}") from e
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Classroom API request failed for {path}: {e}")
                raise ClassroomServiceError("Classroom API unreachable") from e

            if not isinstance(payload, dict):
                logger.error(f"Classroom API returned a non-object body for {path}")
                raise ClassroomServiceError("Classroom API returned an unexpected body")

            items.extend(payload.get(items_key) or [])

            next_token = payload.get("nextPageToken")
            if not next_token:
                return items
            query["pageToken"] = next_token


def _parse_due_date(due: Optional[Dict[str, int]]) -> Optional[date]:
    if not due:
        return None
    try:
        return date(due["year"], due["month"], due["day"])
    except (KeyError, TypeError, ValueError):
        logger.debug(f"Skipping course work with incomplete due date: {due}")
        return None


async def get_classroom_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency yielding an HTTP client for the Classroom API."""
    async with httpx.AsyncClient(timeout=settings.CLASSROOM_TIMEOUT_SECONDS) as client:
        yield client
