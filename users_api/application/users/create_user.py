"""
Use case: Create a user.

Input: CreateUserCommand (name, email)
Output: UserResult with the store-assigned id
Side effects: Inserts one row into the user store.
Failure cases: DatabaseError.
"""

import logging

from users_api.application.users.dtos import CreateUserCommand, UserResult
from users_api.domain.users.entities import NewUser
from users_api.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Orchestrates creating a user.

    Name and email are stored as given; email is neither
    format-checked nor required to be unique.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, command: CreateUserCommand) -> UserResult:
        """Run the create user use case.

        Args:
            command: Name and email of the new user.

        Returns:
            The created user, including its new id.

        Raises:
            DatabaseError: If the insert fails.
        """
        user = await self._user_repo.create_user(
            NewUser(name=command.name, email=command.email)
        )
        logger.info("Created user id=%d", user.id)
        return UserResult.from_entity(user)
