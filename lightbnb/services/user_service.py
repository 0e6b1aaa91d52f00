import logging
from typing import Any, Dict, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.core.exceptions import translate_errors
from lightbnb.schemas.users import UserCreate

logger = logging.getLogger(__name__)

USER_BY_EMAIL_SQL = text(
    "SELECT * FROM users WHERE lower(users.email) LIKE lower(:email)"
)

USER_BY_ID_SQL = text(
    "SELECT * FROM users WHERE users.id = :user_id"
)

INSERT_USER_SQL = text(
    """
    INSERT INTO users (name, email, password)
    VALUES (:name, :email, :password)
    RETURNING *
    """
)


class UserService:
    """Queries and inserts for the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_with_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their email.

        The match is case-insensitive and honours LIKE wildcards.

        Returns:
            The first matching user record, or None
        """
        async with translate_errors("get_user_with_email"):
            result = await self.db.execute(USER_BY_EMAIL_SQL, {"email": email})
            row = result.mappings().first()
        return dict(row) if row else None

    async def get_user_with_id(self, user_id: Any) -> Optional[Dict[str, Any]]:
        """Get a single user given their id, or None."""
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            logger.warning(f"Non-numeric user id {user_id!r} cannot match any user")
            return None

        async with translate_errors("get_user_with_id"):
            result = await self.db.execute(USER_BY_ID_SQL, {"user_id": user_id})
            row = result.mappings().first()
        return dict(row) if row else None

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Add a new user.

        Args:
            user: name, email and password of the new user

        Returns:
            The created user record including its id

        Raises:
            ConstraintViolationError: If the email is already registered
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)

        async with translate_errors("add_user"):
            try:
                result = await self.db.execute(INSERT_USER_SQL, user.model_dump())
                new_user = dict(result.mappings().one())
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                raise

        logger.info(f"User added: {new_user['email']} (ID: {new_user['id']})")
        return new_user
