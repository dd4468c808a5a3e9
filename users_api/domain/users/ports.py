"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the application layer requires from
the outside world. Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from users_api.domain.users.entities import NewUser, User


class UserRepository(ABC):
    """Port for persisting and retrieving users.

    Every method performs a single round trip to the store.
    Implementations raise DatabaseError for any store failure and
    report absence as a value, never as an error.
    """

    @abstractmethod
    async def list_users(self) -> list[User]:
        """Return every stored user. Empty list when there are none."""
        raise NotImplementedError

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def create_user(self, new_user: NewUser) -> User:
        """Insert a user and return it with its store-assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def delete_user(self, user_id: int) -> int:
        """Delete the user with the given id.

        Returns:
            Number of rows removed (0 or 1).
        """
        raise NotImplementedError
