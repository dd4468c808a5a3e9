"""
Adapter: User repository.

Implements UserRepository port.
Maps User entities to rows of the ``users`` table with parameterized SQL.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from users_api.domain.users.entities import NewUser, User
from users_api.domain.users.errors import DatabaseError
from users_api.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

_SELECT_ALL = text("SELECT id, name, email FROM users")
_SELECT_BY_ID = text("SELECT id, name, email FROM users WHERE id = :id")
_INSERT = text("INSERT INTO users (name, email) VALUES (:name, :email)")
_DELETE_BY_ID = text("DELETE FROM users WHERE id = :id")


class SqlUserRepository(UserRepository):
    """SQL implementation of the user repository.

    Each method checks a connection out of the engine's pool for a
    single statement and returns it immediately afterwards. Any
    SQLAlchemy failure is re-raised as DatabaseError.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def list_users(self) -> list[User]:
        """Return every row of the users table.

        Returns:
            List of User entities, in the store's default order.
        """
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(_SELECT_ALL)
                rows = result.mappings().all()
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc

        return [User(id=row["id"], name=row["name"], email=row["email"]) for row in rows]

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id.

        Args:
            user_id: Identifier of the user to fetch.

        Returns:
            User entity or None.
        """
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(_SELECT_BY_ID, {"id": user_id})
                row = result.mappings().first()
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc

        if row is None:
            return None
        return User(id=row["id"], name=row["name"], email=row["email"])

    async def create_user(self, new_user: NewUser) -> User:
        """Insert a user and return it with the id assigned by the store.

        Args:
            new_user: Name and email of the user to create.

        Returns:
            The persisted User entity.
        """
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    _INSERT,
                    {"name": new_user.name, "email": new_user.email},
                )
                user_id = result.lastrowid
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc

        logger.debug("Inserted user id=%d.", user_id)
        return User(id=user_id, name=new_user.name, email=new_user.email)

    async def delete_user(self, user_id: int) -> int:
        """Delete the user with the given id.

        Args:
            user_id: Identifier of the user to delete.

        Returns:
            Number of rows deleted, 0 when no row matched.
        """
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(_DELETE_BY_ID, {"id": user_id})
                deleted = result.rowcount
        except SQLAlchemyError as exc:
            raise DatabaseError(exc) from exc

        logger.debug("Deleted %d row(s) for user id=%d.", deleted, user_id)
        return deleted
