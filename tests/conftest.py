"""
Test fixtures for Campus Hub.

Provides a file-based SQLite database per test, an httpx client bound to
the ASGI app, and fakes for the identity provider, the AI assistant and
the Google Classroom API. No network calls are made.
"""

import os
import tempfile
from pathlib import Path

# Settings are read at import time, so point them at SQLite first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + str(Path(tempfile.gettempdir()) / "campus_hub_test.db")
os.environ.setdefault("GEMINI_API_KEY", "test-key")

from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app import models  # noqa: F401  registers every table on Base.metadata
from app.core.security import Claims, get_token_verifier
from app.db.database import Base, get_db
from app.main import app as fastapi_app
from app.schemas.quiz import QuizQuestion
from app.schemas.study_plan import StudyPlanItem
from app.services.assistant_service import AssistantError, get_study_assistant
from app.services.classroom_service import get_classroom_http_client


# ============================================================
# Fakes
# ============================================================

ALICE_TOKEN = "token-alice"
BOB_TOKEN = "token-bob"
NO_EMAIL_TOKEN = "token-no-email"


class FakeTokenVerifier:
    """Accepts a fixed set of tokens."""

    def __init__(self):
        self.claims: Dict[str, Claims] = {
            ALICE_TOKEN: Claims(
                uid="uid-alice",
                email="alice@example.com",
                name="Alice Student",
                picture="https://example.com/alice.png",
            ),
            BOB_TOKEN: Claims(uid="uid-bob", email="bob@example.com"),
            NO_EMAIL_TOKEN: Claims(uid="uid-anonymous"),
        }
        self.calls: List[str] = []

    async def verify(self, token: str) -> Optional[Claims]:
        self.calls.append(token)
        return self.claims.get(token)


class FakeStudyAssistant:
    """Deterministic assistant; set `fail` to make every call raise."""

    def __init__(self):
        self.fail = False
        self.plan_items: List[StudyPlanItem] = [
            StudyPlanItem(title="Review derivatives", description="Chain rule drills", duration=45, difficulty="Medium"),
            StudyPlanItem(title="Practice integrals", description="Substitution", duration=60, difficulty="High", priority=2),
        ]
        self.analysis_inputs: List[tuple] = []

    def _check(self):
        if self.fail:
            raise AssistantError("assistant unavailable")

    async def generate_quiz(self, subject: str, difficulty: str, count: int) -> List[QuizQuestion]:
        self._check()
        return [
            QuizQuestion(
                question=f"{subject} ({difficulty}) question {i + 1}?",
                options=["A", "B", "C", "D"],
                correct_answer=i % 4,
                explanation=f"Because of rule {i + 1}.",
            )
            for i in range(count)
        ]

    async def generate_study_plan(self, subjects, available_hours, goals) -> List[StudyPlanItem]:
        self._check()
        return list(self.plan_items)

    async def explain_concept(self, concept: str, context: str = "") -> str:
        self._check()
        return f"{concept} explained simply."

    async def analyze_performance(self, quiz_results: List[Dict[str, Any]], study_hours: float) -> str:
        self._check()
        self.analysis_inputs.append((quiz_results, study_hours))
        return f"{len(quiz_results)} quizzes, {study_hours:.1f} hours planned."


class FakeClassroom:
    """Routes Classroom API requests to a replaceable handler."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


# ============================================================
# Database
# ============================================================

@pytest.fixture
async def engine(tmp_path):
    """Fresh file-based SQLite database with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory):
    """A session for seeding and inspecting rows outside the app."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def count_rows(session_factory):
    """Count rows of a model in a fresh session."""
    async def _count(model, *criteria) -> int:
        async with session_factory() as session:
            stmt = select(func.count()).select_from(model)
            if criteria:
                stmt = stmt.where(*criteria)
            return (await session.execute(stmt)).scalar_one()
    return _count


# ============================================================
# App client
# ============================================================

@pytest.fixture
def verifier():
    return FakeTokenVerifier()


@pytest.fixture
def assistant():
    return FakeStudyAssistant()


@pytest.fixture
def classroom():
    return FakeClassroom()


@pytest.fixture
async def client(session_factory, verifier, assistant, classroom):
    """Unauthenticated client for the API with every external service faked."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def override_classroom_http():
        async with httpx.AsyncClient(transport=httpx.MockTransport(classroom.handle)) as http:
            yield http

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_token_verifier] = lambda: verifier
    fastapi_app.dependency_overrides[get_study_assistant] = lambda: assistant
    fastapi_app.dependency_overrides[get_classroom_http_client] = override_classroom_http

    transport = httpx.ASGITransport(app=fastapi_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def alice_headers():
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers():
    return {"Authorization": f"Bearer {BOB_TOKEN}"}


@pytest.fixture
async def alice(client, alice_headers):
    """Alice's user record, created through the verify endpoint."""
    resp = await client.post("/api/auth/verify", json={"idToken": ALICE_TOKEN})
    assert resp.status_code == 200
    return resp.json()["user"]
