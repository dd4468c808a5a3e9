"""
Tests for the users application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic and absence handling.
"""

from unittest.mock import AsyncMock

import pytest

from users_api.application.users.create_user import CreateUserUseCase
from users_api.application.users.delete_user import DeleteUserUseCase
from users_api.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    GetUserQuery,
    UserResult,
)
from users_api.application.users.get_user import GetUserUseCase
from users_api.application.users.list_users import ListUsersUseCase
from users_api.domain.users.entities import NewUser, User
from users_api.domain.users.errors import DatabaseError, UserNotFoundError
from users_api.domain.users.ports import UserRepository

ADA = User(id=1, name="Ada", email="ada@example.com")


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock(spec=UserRepository)


class TestListUsersUseCase:
    """Tests for the ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_maps_entities_to_results(self, repo: AsyncMock) -> None:
        repo.list_users.return_value = [ADA]

        results = await ListUsersUseCase(user_repo=repo).execute()

        assert results == [UserResult(id=1, name="Ada", email="ada@example.com")]

    @pytest.mark.asyncio
    async def test_empty_store(self, repo: AsyncMock) -> None:
        repo.list_users.return_value = []
        assert await ListUsersUseCase(user_repo=repo).execute() == []


class TestGetUserUseCase:
    """Tests for the GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_user(self, repo: AsyncMock) -> None:
        repo.get_user_by_id.return_value = ADA

        result = await GetUserUseCase(user_repo=repo).execute(GetUserQuery(user_id=1))

        assert result.id == 1
        repo.get_user_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_absent_user_raises_not_found(self, repo: AsyncMock) -> None:
        repo.get_user_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await GetUserUseCase(user_repo=repo).execute(GetUserQuery(user_id=999))

        assert exc_info.value.user_id == 999


class TestCreateUserUseCase:
    """Tests for the CreateUserUseCase."""

    @pytest.mark.asyncio
    async def test_passes_input_through_unchanged(self, repo: AsyncMock) -> None:
        repo.create_user.return_value = ADA

        result = await CreateUserUseCase(user_repo=repo).execute(
            CreateUserCommand(name="Ada", email="ada@example.com")
        )

        repo.create_user.assert_awaited_once_with(NewUser(name="Ada", email="ada@example.com"))
        assert result == UserResult(id=1, name="Ada", email="ada@example.com")

    @pytest.mark.asyncio
    async def test_database_error_propagates(self, repo: AsyncMock) -> None:
        repo.create_user.side_effect = DatabaseError(RuntimeError("locked"))

        with pytest.raises(DatabaseError):
            await CreateUserUseCase(user_repo=repo).execute(
                CreateUserCommand(name="Ada", email="ada@example.com")
            )


class TestDeleteUserUseCase:
    """Tests for the DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_deletes_existing_user(self, repo: AsyncMock) -> None:
        repo.delete_user.return_value = 1

        assert await DeleteUserUseCase(user_repo=repo).execute(DeleteUserCommand(user_id=1)) is None
        repo.delete_user.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_zero_rows_raises_not_found(self, repo: AsyncMock) -> None:
        repo.delete_user.return_value = 0

        with pytest.raises(UserNotFoundError):
            await DeleteUserUseCase(user_repo=repo).execute(DeleteUserCommand(user_id=7))
