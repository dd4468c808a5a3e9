"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from users_api.domain.users.entities import User


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        name: Display name of the new user.
        email: Contact address of the new user.
    """

    name: str
    email: str


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching a single user by id."""

    user_id: int


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input DTO for deleting a single user by id."""

    user_id: int


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        id: Store-assigned identifier.
        name: Display name.
        email: Contact address.
    """

    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(id=user.id, name=user.name, email=user.email)
