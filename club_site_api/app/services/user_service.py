"""
Business logic for site accounts.

Accounts live in the ``users`` repository of the injected store.  Only
the configured administrator account (see ``ensure_admin``) and
accounts promoted by it carry admin rights; self-registered accounts
never do.
"""

import logging
from typing import Optional

from club_site_api.app.core.security import hash_password, verify_password
from club_site_api.app.core.storage import ClubStorage
from club_site_api.app.schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Operations on user accounts."""

    @classmethod
    async def get_by_username(cls, storage: ClubStorage, username: str) -> Optional[User]:
        return storage.users.find(lambda user: user.username == username)

    @classmethod
    async def register(cls, storage: ClubStorage, data: UserCreate) -> User:
        """Create a regular (non-admin) account.

        Raises ``ValueError`` when the username is already taken.
        """
        if await cls.get_by_username(storage, data.username):
            raise ValueError(f"Username {data.username!r} is already taken")
        user = storage.users.create(
            {
                "username": data.username,
                "password_hash": hash_password(data.password),
                "is_admin": False,
            }
        )
        logger.info("Registered user %s", user.username)
        return user

    @classmethod
    async def authenticate(cls, storage: ClubStorage, username: str, password: str) -> Optional[User]:
        """Return the account when ``password`` matches, otherwise ``None``."""
        user = await cls.get_by_username(storage, username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", username)
            return None
        return user

    @classmethod
    async def ensure_admin(cls, storage: ClubStorage, username: str, password: str) -> User:
        """Make sure an administrator account named ``username`` exists.

        An existing account keeps its password and is promoted if
        needed; otherwise a new admin account is created.
        """
        user = await cls.get_by_username(storage, username)
        if user is None:
            user = storage.users.create(
                {"username": username, "password_hash": hash_password(password), "is_admin": True}
            )
            logger.info("Created administrator account %s", username)
        elif not user.is_admin:
            user = storage.users.update(user.id, {"is_admin": True})
            logger.info("Promoted %s to administrator", username)
        return user
