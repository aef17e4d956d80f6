"""Tests for the client package: session states, cached API access and the view gate."""

import json

import httpx
import pytest

from app.client import (
    ApiClient,
    ApiError,
    AuthState,
    LocalStorage,
    Session,
    VIEWS,
    load_view,
    resolve_route,
)
from tests.conftest import ALICE_TOKEN


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "client" / "storage.json")


@pytest.fixture
def session(client, storage):
    """Session talking to the in-process API."""
    return Session(client, storage)


class TestLocalStorage:
    def test_values_persist_to_disk(self, tmp_path):
        path = tmp_path / "storage.json"
        LocalStorage(path).set("googleAccessToken", "g-token")
        assert LocalStorage(path).get("googleAccessToken") == "g-token"

    def test_remove(self, storage):
        storage.set("justSignedIn", "true")
        storage.remove("justSignedIn")
        assert storage.get("justSignedIn") is None

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        assert LocalStorage(path).get("anything") is None


class TestSession:
    async def test_starts_loading(self, session):
        assert session.state == AuthState.LOADING

    async def test_restore_valid_token(self, session):
        state = await session.restore(ALICE_TOKEN)
        assert state == AuthState.AUTHENTICATED
        assert session.user["email"] == "alice@example.com"
        assert session.auth_headers() == {"Authorization": f"Bearer {ALICE_TOKEN}"}

    async def test_restore_invalid_token_single_attempt(self, session, verifier):
        state = await session.restore("expired")
        assert state == AuthState.UNAUTHENTICATED
        assert session.token is None
        assert verifier.calls == ["expired"]

    async def test_restore_without_token(self, session, verifier):
        assert await session.restore(None) == AuthState.UNAUTHENTICATED
        assert verifier.calls == []

    async def test_sign_in_stores_flags(self, session, storage):
        await session.sign_in(ALICE_TOKEN, google_access_token="g-token")
        assert storage.get("justSignedIn") == "true"
        assert session.google_access_token == "g-token"

    async def test_failed_sign_in_stores_nothing(self, session, storage):
        assert await session.sign_in("forged") == AuthState.UNAUTHENTICATED
        assert storage.get("justSignedIn") is None

    async def test_sign_out_clears_everything(self, session, storage):
        await session.sign_in(ALICE_TOKEN, google_access_token="g-token")
        await ApiClient(session).list_quizzes()
        assert session.cache

        session.sign_out()
        assert session.state == AuthState.UNAUTHENTICATED
        assert session.token is None
        assert session.cache == {}
        assert storage.get("googleAccessToken") is None


class TestRouteGate:
    async def test_loading_shows_nothing(self, session):
        result = resolve_route("/quiz-generator", session)
        assert result.loading
        assert result.view is None

    async def test_unauthenticated_redirected_to_login(self, session):
        await session.restore(None)
        for path, view in VIEWS.items():
            if view.protected:
                assert resolve_route(path, session).redirect == "/login"
        assert resolve_route("/login", session).view.name == "login"

    async def test_authenticated_login_redirects_home(self, session):
        await session.restore(ALICE_TOKEN)
        assert resolve_route("/login", session).redirect == "/"
        assert resolve_route("/collaboration", session).view.name == "collaboration"

    async def test_unknown_path(self, session):
        await session.restore(ALICE_TOKEN)
        assert resolve_route("/nowhere", session).not_found

    def test_six_protected_views(self):
        protected = [v.name for v in VIEWS.values() if v.protected]
        assert sorted(protected) == sorted([
            "dashboard",
            "study_planner",
            "quiz_generator",
            "collaboration",
            "idea_marketplace",
            "learning_buddy",
        ])


class TestLoadView:
    async def test_dashboard_welcome_shown_once(self, session):
        await session.sign_in(ALICE_TOKEN)
        api = ApiClient(session)
        dashboard = VIEWS["/"]

        first = await load_view(dashboard, api)
        assert first.show_welcome is True
        assert first.data["/api/user/profile"]["user"]["email"] == "alice@example.com"
        assert first.data["/api/quizzes"] == {"quizzes": []}

        second = await load_view(dashboard, api)
        assert second.show_welcome is False

    async def test_other_views_keep_flag(self, session, storage):
        await session.sign_in(ALICE_TOKEN)
        await load_view(VIEWS["/study-planner"], ApiClient(session))
        assert storage.get("justSignedIn") == "true"


class TestApiClientAgainstApp:
    async def test_completing_quiz_refreshes_profile(self, session):
        await session.restore(ALICE_TOKEN)
        api = ApiClient(session)

        assert (await api.get_profile())["studyPoints"] == 0
        quiz = await api.generate_quiz("Algebra", "Beginner", 5)
        await api.complete_quiz(quiz["id"], 3)

        assert (await api.get_profile())["studyPoints"] == 30
        assert (await api.list_quizzes())[0]["completed"] is True
        assert len(await api.list_notifications()) == 1

    async def test_server_message_surfaces_in_error(self, session, assistant):
        await session.restore(ALICE_TOKEN)
        assistant.fail = True
        with pytest.raises(ApiError) as excinfo:
            await ApiClient(session).generate_quiz("Algebra")
        assert excinfo.value.status_code == 500
        assert excinfo.value.message == "Failed to generate quiz"

    async def test_classroom_needs_google_token(self, session):
        await session.restore(ALICE_TOKEN)
        with pytest.raises(ApiError) as excinfo:
            await ApiClient(session).list_classroom_assignments()
        assert excinfo.value.status_code == 400

    async def test_classroom_uses_current_google_token(self, session, storage, classroom):
        await session.restore(ALICE_TOKEN)
        api = ApiClient(session)

        storage.set("googleAccessToken", "g-one")
        assert await api.list_classroom_assignments() == []
        storage.set("googleAccessToken", "g-two")
        assert await api.list_classroom_assignments() == []

        assert classroom.requests[-1].headers["Authorization"] == "Bearer g-two"
        assert "/api/classroom/assignments" not in session.cache


class TestApiClientCache:
    @pytest.fixture
    def backend(self):
        """Minimal fake API counting requests per method and path."""
        calls = []
        groups = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append((request.method, request.url.path))
            if request.method == "GET" and request.url.path in ("/api/study-groups", "/api/study-groups/my"):
                return httpx.Response(200, json={"groups": list(groups)})
            if request.method == "POST" and request.url.path == "/api/study-groups":
                group = {"id": str(len(groups) + 1), **json.loads(request.content)}
                groups.append(group)
                return httpx.Response(200, json={"group": group})
            return httpx.Response(404, json={"message": "Not found"})

        return calls, handler

    @pytest.fixture
    async def api(self, backend, storage):
        _, handler = backend
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api") as http:
            session = Session(http, storage)
            session.token = "t"
            yield ApiClient(session)

    async def test_reads_are_cached_per_path(self, api, backend):
        calls, _ = backend
        await api.list_study_groups()
        await api.list_study_groups()
        await api.list_my_study_groups()
        assert calls == [("GET", "/api/study-groups"), ("GET", "/api/study-groups/my")]

    async def test_create_group_invalidates_both_lists(self, api, backend):
        calls, _ = backend
        await api.list_study_groups()
        await api.list_my_study_groups()

        await api.create_study_group({"name": "Calc Crew", "subject": "Calculus"})
        groups = await api.list_study_groups()
        await api.list_my_study_groups()

        assert [g["name"] for g in groups] == ["Calc Crew"]
        assert calls.count(("GET", "/api/study-groups")) == 2
        assert calls.count(("GET", "/api/study-groups/my")) == 2

    async def test_failed_mutation_keeps_cache(self, api, backend):
        calls, _ = backend
        await api.list_study_groups()
        with pytest.raises(ApiError) as excinfo:
            await api.join_study_group("missing")
        assert excinfo.value.status_code == 404
        await api.list_study_groups()
        assert calls.count(("GET", "/api/study-groups")) == 1
