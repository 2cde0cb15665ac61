"""Signup, login and profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from ohsnap.api.dependencies import (
    clear_session_cookie,
    get_container,
    optional_identity,
    set_session_cookie,
)
from ohsnap.api.schemas import LoginRequest, ProfileRequest, SignupRequest
from ohsnap.domain.models import Identity, ProfilePatch

if TYPE_CHECKING:
    from ohsnap.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest, request: Request, response: Response
) -> dict[str, object]:
    """Register a new account and log it in."""
    container: AppContainer = get_container(request)
    user, session = container.auth_service.signup(
        payload.username, payload.email, payload.password
    )
    set_session_cookie(response, container.settings, session.token)
    return {
        "message": "User created successfully",
        "userId": str(user.id),
        "username": user.username,
    }


@router.post("/login")
def login(
    payload: LoginRequest, request: Request, response: Response
) -> dict[str, object]:
    """Check credentials and start a session."""
    container: AppContainer = get_container(request)
    user, session = container.auth_service.login(payload.username, payload.password)
    set_session_cookie(response, container.settings, session.token)
    return {
        "message": "Login successful",
        "user": {"id": str(user.id), "username": user.username, "email": user.email},
    }


@router.post("/logout")
def logout(request: Request, response: Response) -> dict[str, str]:
    """End the caller's session."""
    container: AppContainer = get_container(request)
    token = request.cookies.get(container.settings.session_cookie_name)
    container.auth_service.logout(token)
    clear_session_cookie(response, container.settings)
    return {"message": "Logout successful"}


@router.get("/me")
def me(
    request: Request, identity: Identity | None = Depends(optional_identity)
) -> dict[str, str]:
    """Return the caller as recorded in their session."""
    container: AppContainer = get_container(request)
    current = container.auth_service.current_user(identity)
    return {
        "userId": str(current.user_id),
        "username": current.username,
        "email": current.email,
    }


@router.put("/profile")
def update_profile(
    payload: ProfileRequest,
    request: Request,
    identity: Identity | None = Depends(optional_identity),
) -> dict[str, str]:
    """Update the caller's email and bio."""
    container: AppContainer = get_container(request)
    container.auth_service.update_profile(
        identity, ProfilePatch(email=payload.email, bio=payload.bio)
    )
    return {"message": "Profile updated successfully"}
