from __future__ import annotations

from sqlite3 import Row
from typing import List, Optional

from dao import models
from dao.base import DaoBase
from utils.logger import get_logger
from utils.security import hash_password

_logger = get_logger(__name__)


def _map_user_row(row: Row) -> models.User:
    return models.User(
        user_id=int(row["user_id"]),
        username=row["username"],
        password=row["hashed_password"],
        role=row["role"],
    )


class UserDao(DaoBase):
    """
    User accounts. Passwords are stored as bcrypt hashes.

    Both write paths re-read the account by username once the write is
    committed, and blank the password on what they return.
    """

    async def create(self, new_user: models.User) -> Optional[models.User]:
        """
        Hash the password, insert the account and return it as stored.
        `new_user.user_id` is set from the generated key when one is available.
        """
        hashed = hash_password(new_user.password)
        async with self._connect() as conn:
            cur = await conn.execute(
                "INSERT INTO users(username, hashed_password, role) VALUES (?, ?, ?);",
                (new_user.username, hashed, new_user.role),
            )
            if cur.rowcount > 0 and cur.lastrowid:
                new_user.user_id = cur.lastrowid
            await cur.close()
            await conn.commit()

        _logger.debug(f"Created user '{new_user.username}'")
        user = await self.get_user_by_user_name(new_user.username)
        if user is None:
            return None
        user.password = ""
        return user

    async def update(self, updated_user: models.User) -> Optional[models.User]:
        """Overwrite username, password and role by id; the password is always re-hashed."""
        hashed = hash_password(updated_user.password)
        async with self._connect() as conn:
            await conn.execute(
                """
                UPDATE users
                SET username = ?,
                    hashed_password = ?,
                    role = ?
                WHERE user_id = ?;
                """,
                (updated_user.username, hashed, updated_user.role, updated_user.user_id),
            )
            await conn.commit()

        user = await self.get_user_by_user_name(updated_user.username)
        if user is None:
            return None
        user.password = ""
        return user

    async def get_all(self) -> List[models.User]:
        async with self._connect() as conn:
            cur = await conn.execute(
                "SELECT user_id, username, hashed_password, role FROM users;"
            )
            rows = await cur.fetchall()
            await cur.close()
        return [_map_user_row(row) for row in rows]

    async def get_user_by_id(self, user_id: int) -> Optional[models.User]:
        async with self._connect() as conn:
            cur = await conn.execute(
                "SELECT user_id, username, hashed_password, role FROM users WHERE user_id = ?;",
                (user_id,),
            )
            row = await cur.fetchone()
            await cur.close()
        if not row:
            return None
        return _map_user_row(row)

    async def get_user_by_user_name(self, username: str) -> Optional[models.User]:
        async with self._connect() as conn:
            cur = await conn.execute(
                "SELECT user_id, username, hashed_password, role FROM users WHERE username = ?;",
                (username,),
            )
            row = await cur.fetchone()
            await cur.close()
        if not row:
            return None
        return _map_user_row(row)

    async def get_id_by_username(self, username: str) -> int:
        """Id of the account, or -1 if there is none."""
        user = await self.get_user_by_user_name(username)
        if user is not None:
            return user.user_id
        return -1

    async def exists(self, username: str) -> bool:
        return await self.get_user_by_user_name(username) is not None
