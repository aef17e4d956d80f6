"""
Client Views

Route table for the client: six protected views plus the public login
view. resolve_route applies the auth gate; load_view fetches the data a
view shows through the cached ApiClient.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from app.client.api import ApiClient
from app.client.session import AuthState, Session

LOGIN_PATH = "/login"
HOME_PATH = "/"


@dataclass(frozen=True)
class View:
    path: str
    name: str
    title: str
    reads: Tuple[str, ...] = ()
    protected: bool = True


VIEWS: Dict[str, View] = {
    view.path: view
    for view in (
        View(
            "/",
            "dashboard",
            "Dashboard",
            ("/api/user/profile", "/api/study-plans", "/api/quizzes", "/api/study-groups/my", "/api/ideas"),
        ),
        View("/study-planner", "study_planner", "Study Planner", ("/api/study-plans",)),
        View("/quiz-generator", "quiz_generator", "Quiz Generator", ("/api/quizzes",)),
        View("/collaboration", "collaboration", "Collaboration", ("/api/study-groups", "/api/study-groups/my")),
        View("/idea-marketplace", "idea_marketplace", "Idea Marketplace", ("/api/ideas",)),
        View("/learning-buddy", "learning_buddy", "Learning Buddy"),
        View(LOGIN_PATH, "login", "Sign in", protected=False),
    )
}


@dataclass
class RouteResult:
    view: Optional[View] = None
    redirect: Optional[str] = None
    loading: bool = False

    @property
    def not_found(self) -> bool:
        return self.view is None and self.redirect is None and not self.loading


@dataclass
class ViewData:
    view: View
    data: Dict[str, Any] = field(default_factory=dict)
    show_welcome: bool = False


def resolve_route(path: str, session: Session) -> RouteResult:
    """
    Apply the auth gate to a path.

    - loading: nothing is shown yet
    - unauthenticated on a protected view: redirect to /login
    - authenticated on /login: redirect to /
    """
    view = VIEWS.get(path)
    if view is None:
        return RouteResult()

    if session.state == AuthState.LOADING:
        return RouteResult(loading=True)

    if view.protected and session.state == AuthState.UNAUTHENTICATED:
        return RouteResult(redirect=LOGIN_PATH)

    if not view.protected and session.is_authenticated:
        return RouteResult(redirect=HOME_PATH)

    return RouteResult(view=view)


async def load_view(view: View, api: ApiClient) -> ViewData:
    """Issue the view's cached reads; the dashboard also consumes the sign-in flag."""
    results = await asyncio.gather(*(api.get(path) for path in view.reads))
    view_data = ViewData(view=view, data=dict(zip(view.reads, results)))

    if view.name == "dashboard":
        view_data.show_welcome = api.session.consume_just_signed_in()

    return view_data
