"""
Use case: Fetch a single user by id.

Input: GetUserQuery (user_id)
Output: UserResult
Side effects: None (read-only query).
Failure cases: UserNotFoundError, DatabaseError.
"""

import logging

from users_api.application.users.dtos import GetUserQuery, UserResult
from users_api.domain.users.errors import UserNotFoundError
from users_api.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Orchestrates fetching a user by id.

    The repository reports absence as None; this use case turns it
    into UserNotFoundError.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, query: GetUserQuery) -> UserResult:
        """Run the get user use case.

        Args:
            query: The id of the user to fetch.

        Returns:
            The matching user.

        Raises:
            UserNotFoundError: If no user has the given id.
            DatabaseError: If the store query fails.
        """
        user = await self._user_repo.get_user_by_id(query.user_id)
        if user is None:
            raise UserNotFoundError(query.user_id)
        return UserResult.from_entity(user)
