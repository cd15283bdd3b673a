"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations and hands every
collaborator to them through their constructors.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IPasswordHasher, ITokenSigner
    from modules.tasks.interfaces import ITaskService
    from modules.tasks.repository import TaskRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._token_signer: "ITokenSigner | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._user_repository: "UserRepository | None" = None
        self._task_repository: "TaskRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._task_service: "ITaskService | None" = None

    @property
    def token_signer(self) -> "ITokenSigner":
        """Get the session token signer."""
        if self._token_signer is None:
            from modules.auth.tokens import JWTTokenSigner
            from shared.config import get_settings
            settings = get_settings()
            self._token_signer = JWTTokenSigner(
                secret=settings.jwt_secret,
                algorithm=settings.jwt_algorithm,
                expires_in=timedelta(minutes=settings.jwt_expires_minutes),
            )
        return self._token_signer

    @property
    def password_hasher(self) -> "IPasswordHasher":
        """Get the password hasher."""
        if self._password_hasher is None:
            from modules.auth.passwords import BcryptPasswordHasher
            from shared.config import get_settings
            self._password_hasher = BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def task_repository(self) -> "TaskRepository":
        """Get the task repository instance."""
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            from shared.database import get_supabase_client
            self._task_repository = TaskRepository(get_supabase_client())
        return self._task_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                token_signer=self.token_signer,
                password_hasher=self.password_hasher,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user profile service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=self.user_repository,
                password_hasher=self.password_hasher,
            )
        return self._user_service

    @property
    def tasks(self) -> "ITaskService":
        """Get the task service instance."""
        if self._task_service is None:
            from modules.tasks.service import TaskService
            self._task_service = TaskService(repository=self.task_repository)
        return self._task_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_signer = None
        self._password_hasher = None
        self._user_repository = None
        self._task_repository = None
        self._auth_service = None
        self._user_service = None
        self._task_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user profile service."""
    return get_container().users


def get_task_service() -> "ITaskService":
    """FastAPI dependency for task service."""
    return get_container().tasks
