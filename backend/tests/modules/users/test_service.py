"""Tests for the user profile service."""

import pytest

from modules.users.exceptions import (
    EmailAlreadyExistsError,
    ProfileNotFoundError,
    UsernameAlreadyExistsError,
)
from modules.users.models import UpdateUserRequest


class TestGetProfile:
    @pytest.mark.asyncio
    async def test_get_profile(self, user_service, make_user):
        user = make_user()

        profile = await user_service.get_profile(user.id)

        assert profile.id == user.id
        assert profile.email == "john.doe@example.com"
        assert "password_hash" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_missing(self, user_service):
        with pytest.raises(ProfileNotFoundError):
            await user_service.get_profile("missing")


class TestUpdateProfile:
    @pytest.mark.asyncio
    async def test_partial_update(self, user_service, make_user):
        user = make_user()

        profile = await user_service.update_profile(user.id, UpdateUserRequest(firstName="Johnny"))

        assert profile.first_name == "Johnny"
        assert profile.last_name == "Doe"
        assert profile.username == "johndoe"

    @pytest.mark.asyncio
    async def test_password_is_rehashed(self, user_service, make_user, user_repository):
        user = make_user()

        await user_service.update_profile(user.id, UpdateUserRequest(password="NewSecret1!"))

        assert user_repository.get_by_id(user.id).password_hash == "hashed:NewSecret1!"

    @pytest.mark.asyncio
    async def test_email_taken_by_someone_else(self, user_service, make_user):
        user = make_user()
        make_user(username="other", email="other@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            await user_service.update_profile(user.id, UpdateUserRequest(email="other@example.com"))

    @pytest.mark.asyncio
    async def test_username_taken_by_someone_else(self, user_service, make_user):
        user = make_user()
        make_user(username="other", email="other@example.com")

        with pytest.raises(UsernameAlreadyExistsError):
            await user_service.update_profile(user.id, UpdateUserRequest(username="other"))

    @pytest.mark.asyncio
    async def test_keeping_own_email_is_fine(self, user_service, make_user):
        user = make_user()

        profile = await user_service.update_profile(
            user.id, UpdateUserRequest(email="john.doe@example.com", lastName="Dough")
        )

        assert profile.last_name == "Dough"

    @pytest.mark.asyncio
    async def test_empty_update_returns_profile(self, user_service, make_user):
        user = make_user()
        profile = await user_service.update_profile(user.id, UpdateUserRequest())
        assert profile.id == user.id

    @pytest.mark.asyncio
    async def test_missing(self, user_service):
        with pytest.raises(ProfileNotFoundError):
            await user_service.update_profile("missing", UpdateUserRequest(firstName="Nobody"))


class TestDeleteAccount:
    @pytest.mark.asyncio
    async def test_delete(self, user_service, make_user, user_repository):
        user = make_user()

        deleted = await user_service.delete_account(user.id)

        assert deleted.id == user.id
        assert user_repository.get_by_id(user.id) is None

    @pytest.mark.asyncio
    async def test_missing(self, user_service):
        with pytest.raises(ProfileNotFoundError):
            await user_service.delete_account("missing")
