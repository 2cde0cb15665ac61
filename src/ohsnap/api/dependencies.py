"""Request dependencies for session cookies and the current caller."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request, Response

from ohsnap.domain.models import Identity
from ohsnap.errors import AuthError

if TYPE_CHECKING:
    from ohsnap.config import Settings
    from ohsnap.containers import AppContainer

_SECONDS_PER_DAY = 86400


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def optional_identity(request: Request, response: Response) -> Identity | None:
    """Resolve the session cookie, refreshing it while the session is live."""
    container = get_container(request)
    token = request.cookies.get(container.settings.session_cookie_name)
    identity = container.session_service.resolve(token)
    if identity is not None:
        set_session_cookie(response, container.settings, identity.token)
    return identity


def require_identity(
    identity: Identity | None = Depends(optional_identity),
) -> Identity:
    """Reject requests without a live session."""
    if identity is None:
        raise AuthError("Authentication required")
    return identity


def set_session_cookie(response: Response, settings: Settings, token: str) -> None:
    """Attach the session cookie to a response."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_days * _SECONDS_PER_DAY,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
    )
