"""Tests for account lifecycle actions."""

import pytest

from ohsnap.domain.models import ProfilePatch
from ohsnap.errors import AuthError, ConflictError, ValidationError
from ohsnap.services.auth import INVALID_CREDENTIALS, AuthService
from ohsnap.services.sessions import SessionService
from tests.conftest import InMemorySessionRepository, InMemoryUserRepository


def _service() -> tuple[AuthService, InMemoryUserRepository]:
    users = InMemoryUserRepository()
    sessions = SessionService(InMemorySessionRepository())
    return AuthService(repository=users, session_service=sessions), users


def test_signup_stores_hashed_password_and_opens_session() -> None:
    service, users = _service()

    user, session = service.signup("ansel", "ansel@example.com", "yosemite")

    stored = users.users[user.id]
    assert stored.password_hash != "yosemite"
    assert stored.bio == ""
    assert session.user_id == user.id
    assert service.session_service.resolve(session.token) is not None


@pytest.mark.parametrize(
    ("username", "email", "password"),
    [
        (None, "a@example.com", "pw"),
        ("ansel", "", "pw"),
        ("ansel", "a@example.com", None),
    ],
)
def test_signup_requires_all_fields(username, email, password) -> None:
    service, users = _service()

    with pytest.raises(ValidationError, match="All fields are required"):
        service.signup(username, email, password)

    assert users.users == {}


def test_signup_rejects_duplicate_username() -> None:
    service, users = _service()
    service.signup("ansel", "ansel@example.com", "yosemite")

    with pytest.raises(ConflictError, match="Username already exists"):
        service.signup("ansel", "other@example.com", "half-dome")

    assert len(users.users) == 1


def test_usernames_are_case_sensitive() -> None:
    service, users = _service()
    service.signup("ansel", "ansel@example.com", "yosemite")
    service.signup("Ansel", "ansel2@example.com", "yosemite")

    assert len(users.users) == 2


def test_login_returns_user_and_session() -> None:
    service, _ = _service()
    created, _ = service.signup("ansel", "ansel@example.com", "yosemite")

    user, session = service.login("ansel", "yosemite")

    assert user.id == created.id
    assert session.username == "ansel"


def test_login_failures_are_indistinguishable() -> None:
    service, _ = _service()
    service.signup("ansel", "ansel@example.com", "yosemite")

    with pytest.raises(AuthError) as wrong_password:
        service.login("ansel", "wrong")
    with pytest.raises(AuthError) as unknown_user:
        service.login("nobody", "yosemite")

    assert wrong_password.value.message == INVALID_CREDENTIALS
    assert unknown_user.value.message == INVALID_CREDENTIALS
    assert wrong_password.value.status_code == unknown_user.value.status_code == 401


def test_login_requires_fields() -> None:
    service, _ = _service()

    with pytest.raises(ValidationError):
        service.login("ansel", "")


def test_logout_destroys_session() -> None:
    service, _ = _service()
    _, session = service.signup("ansel", "ansel@example.com", "yosemite")

    service.logout(session.token)

    assert service.session_service.resolve(session.token) is None


def test_logout_without_session_is_rejected() -> None:
    service, _ = _service()

    with pytest.raises(AuthError, match="Authentication required"):
        service.logout(None)


def test_current_user_requires_identity() -> None:
    service, _ = _service()

    with pytest.raises(AuthError, match="Not authenticated"):
        service.current_user(None)


def test_update_profile_applies_only_provided_fields() -> None:
    service, users = _service()
    user, session = service.signup("ansel", "ansel@example.com", "yosemite")
    identity = service.session_service.resolve(session.token)

    service.update_profile(identity, ProfilePatch(bio="Large format"))

    stored = users.users[user.id]
    assert stored.bio == "Large format"
    assert stored.email == "ansel@example.com"
    assert stored.updated_at is not None


def test_update_profile_allows_clearing_bio() -> None:
    service, users = _service()
    user, session = service.signup("ansel", "ansel@example.com", "yosemite")
    identity = service.session_service.resolve(session.token)
    service.update_profile(identity, ProfilePatch(bio="Large format"))

    service.update_profile(identity, ProfilePatch(bio=""))

    assert users.users[user.id].bio == ""


def test_update_profile_mirrors_email_into_session() -> None:
    service, users = _service()
    user, session = service.signup("ansel", "ansel@example.com", "yosemite")
    identity = service.session_service.resolve(session.token)

    service.update_profile(identity, ProfilePatch(email="new@example.com"))

    assert users.users[user.id].email == "new@example.com"
    refreshed = service.session_service.resolve(session.token)
    assert refreshed is not None
    assert refreshed.email == "new@example.com"


def test_update_profile_requires_identity() -> None:
    service, _ = _service()

    with pytest.raises(AuthError, match="Not authenticated"):
        service.update_profile(None, ProfilePatch(bio="x"))
