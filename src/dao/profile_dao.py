from typing import Optional

from dao import models
from dao.base import DaoBase


class ProfileDao(DaoBase):
    """Contact and shipping details, one row per user."""

    async def create(self, profile: models.Profile) -> models.Profile:
        """Insert the profile under its user_id and hand the same object back."""
        async with self._connect() as conn:
            await conn.execute(
                """
                INSERT INTO profiles(user_id, first_name, last_name, phone, email,
                                     address, city, state, zip)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?);
                """,
                (
                    profile.user_id,
                    profile.first_name,
                    profile.last_name,
                    profile.phone,
                    profile.email,
                    profile.address,
                    profile.city,
                    profile.state,
                    profile.zip_code,
                ),
            )
            await conn.commit()
        return profile

    async def update(self, user_id: int, profile: models.Profile) -> models.Profile:
        async with self._connect() as conn:
            await conn.execute(
                """
                UPDATE profiles
                SET first_name = ?,
                    last_name = ?,
                    phone = ?,
                    email = ?,
                    address = ?,
                    city = ?,
                    state = ?,
                    zip = ?
                WHERE user_id = ?;
                """,
                (
                    profile.first_name,
                    profile.last_name,
                    profile.phone,
                    profile.email,
                    profile.address,
                    profile.city,
                    profile.state,
                    profile.zip_code,
                    user_id,
                ),
            )
            await conn.commit()
        return profile

    async def get_profile_by_user_id(self, user_id: int) -> Optional[models.Profile]:
        async with self._connect() as conn:
            cur = await conn.execute(
                """
                SELECT first_name, last_name, phone, email, address, city, state, zip
                FROM profiles
                WHERE user_id = ?;
                """,
                (user_id,),
            )
            row = await cur.fetchone()
            await cur.close()
        if not row:
            return None
        # user_id comes from the argument, the row only carries the details
        return models.Profile(
            user_id=user_id,
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            email=row["email"],
            address=row["address"],
            city=row["city"],
            state=row["state"],
            zip_code=row["zip"],
        )
