"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A persisted user record.

    Attributes:
        id: Store-assigned identifier. Immutable once created.
        name: Display name. Required, not validated further.
        email: Contact address. Required; neither unique nor format-checked.
    """

    id: int
    name: str
    email: str


@dataclass(frozen=True)
class NewUser:
    """Input shape for creating a user. Never persisted on its own."""

    name: str
    email: str
