"""
Use case: List every stored user.

Input: None
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: DatabaseError.
"""

import logging

from users_api.application.users.dtos import UserResult
from users_api.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Orchestrates listing all users.

    An empty table yields an empty list, never an error.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self) -> list[UserResult]:
        """Run the list users use case.

        Returns:
            Every stored user, in no guaranteed order.

        Raises:
            DatabaseError: If the store query fails.
        """
        users = await self._user_repo.list_users()
        logger.debug("Listed %d users.", len(users))
        return [UserResult.from_entity(user) for user in users]
