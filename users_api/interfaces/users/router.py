"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Body and path shape are validated by FastAPI/Pydantic.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Response, status

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
from users_api.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
)
from users_api.interfaces.users.schemas import (
    CreateUserRequest,
    ErrorResponse,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

# Ids are stored as signed 64-bit SQLite integers
USER_ID_MIN = -(2**63)
USER_ID_MAX = 2**63 - 1


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(id=result.id, name=result.name, email=result.email)


@router.get(
    "",
    response_model=list[UserResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List users",
)
async def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Return every stored user."""
    results = await use_case.execute()
    return [_to_response(r) for r in results]


@router.post(
    "",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a user",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Create a user and return it with its assigned id."""
    result = await use_case.execute(
        CreateUserCommand(name=request.name, email=request.email)
    )
    return _to_response(result)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a user by id",
)
async def get_user(
    user_id: int = Path(..., ge=USER_ID_MIN, le=USER_ID_MAX),
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
) -> UserResponse:
    """Return a single user."""
    result = await use_case.execute(GetUserQuery(user_id=user_id))
    return _to_response(result)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a user by id",
)
async def delete_user(
    user_id: int = Path(..., ge=USER_ID_MIN, le=USER_ID_MAX),
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete a single user. Responds with an empty body."""
    await use_case.execute(DeleteUserCommand(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
