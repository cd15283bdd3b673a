"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import datetime, timezone, timedelta

import jwt  # PyJWT
import pytest

# Import the app first: module routers import the api package
from api.app import create_app
from api.dependencies import get_auth_service, get_task_service, get_user_service, reset_container
from modules.auth.service import AuthService
from modules.auth.tokens import JWTTokenSigner
from modules.tasks.service import TaskService
from modules.users.service import UserService
from shared.config import get_settings

from fakes import FakePasswordHasher, InMemoryTaskRepository, InMemoryUserRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Fixed "now" for date-sensitive tests: mid-afternoon UTC
FIXED_NOW = datetime(2026, 2, 17, 15, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Give every test fresh settings and a fresh service container."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    """The frozen current time."""
    return FIXED_NOW


@pytest.fixture
def token_signer() -> JWTTokenSigner:
    """Token signer using the test secret."""
    return JWTTokenSigner(TEST_JWT_SECRET)


@pytest.fixture
def make_token():
    """Factory for raw session tokens, including broken ones."""

    def _make(
        user_id: str = "test-user-123",
        username: str = "testuser",
        expired: bool = False,
        secret: str = TEST_JWT_SECRET,
    ) -> str:
        issued = datetime.now(timezone.utc)
        exp = issued - timedelta(hours=1) if expired else issued + timedelta(hours=1)
        payload = {
            "sub": user_id,
            "username": username,
            "iat": int(issued.timestamp()),
            "exp": int(exp.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def task_repository(user_repository) -> InMemoryTaskRepository:
    return InMemoryTaskRepository(users=user_repository)


@pytest.fixture
def auth_service(user_repository, token_signer, password_hasher) -> AuthService:
    return AuthService(
        users=user_repository,
        token_signer=token_signer,
        password_hasher=password_hasher,
    )


@pytest.fixture
def user_service(user_repository, password_hasher) -> UserService:
    return UserService(repository=user_repository, password_hasher=password_hasher)


@pytest.fixture
def task_service(task_repository, now) -> TaskService:
    return TaskService(repository=task_repository, now=lambda: now)


@pytest.fixture
def make_user(user_repository, password_hasher):
    """Insert a user straight into the repository."""

    def _make(
        username: str = "johndoe",
        email: str = "john.doe@example.com",
        password: str = "Secret123!",
    ):
        return user_repository.create({
            "first_name": "John",
            "last_name": "Doe",
            "email": email,
            "username": username,
            "password_hash": password_hasher.hash(password),
        })

    return _make


@pytest.fixture
def app(auth_service, user_service, task_service):
    """
    A fresh app wired to the in-memory services.

    Session tokens signed with the test secret are accepted.
    """
    application = create_app()
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_task_service] = lambda: task_service
    yield application
    application.dependency_overrides.clear()
