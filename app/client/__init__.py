from app.client.session import AuthState, LocalStorage, Session
from app.client.api import ApiClient, ApiError
from app.client.views import View, VIEWS, RouteResult, ViewData, resolve_route, load_view

__all__ = [
    "AuthState",
    "LocalStorage",
    "Session",
    "ApiClient",
    "ApiError",
    "View",
    "VIEWS",
    "RouteResult",
    "ViewData",
    "resolve_route",
    "load_view",
]
