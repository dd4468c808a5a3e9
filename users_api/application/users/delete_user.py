"""
Use case: Delete a user by id.

Input: DeleteUserCommand (user_id)
Output: None
Side effects: Removes at most one row from the user store (hard delete).
Failure cases: UserNotFoundError, DatabaseError.
"""

import logging

from users_api.application.users.dtos import DeleteUserCommand
from users_api.domain.users.errors import UserNotFoundError
from users_api.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Orchestrates deleting a user.

    Deleting an id that matches no row is reported as
    UserNotFoundError, so a second delete of the same id fails.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, command: DeleteUserCommand) -> None:
        """Run the delete user use case.

        Args:
            command: The id of the user to delete.

        Raises:
            UserNotFoundError: If no user has the given id.
            DatabaseError: If the delete fails.
        """
        deleted = await self._user_repo.delete_user(command.user_id)
        if deleted == 0:
            raise UserNotFoundError(command.user_id)
        logger.info("Deleted user id=%d", command.user_id)
