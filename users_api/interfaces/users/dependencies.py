"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the engine held on
the application state into adapters and use cases.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from users_api.application.users.create_user import CreateUserUseCase
from users_api.application.users.delete_user import DeleteUserUseCase
from users_api.application.users.get_user import GetUserUseCase
from users_api.application.users.list_users import ListUsersUseCase
from users_api.core.config import Settings
from users_api.domain.users.ports import UserRepository
from users_api.infrastructure.users.user_repository import SqlUserRepository


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_engine(request: Request) -> AsyncEngine:
    """Return the engine opened by the application lifespan."""
    return request.app.state.engine


def get_user_repository(engine: AsyncEngine = Depends(get_engine)) -> UserRepository:
    """Build the SQL user repository on the shared engine."""
    return SqlUserRepository(engine)


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo=user_repo)


def get_get_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=user_repo)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=user_repo)
