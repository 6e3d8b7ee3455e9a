"""
User Service - registration, login and profile lookup.

Passwords are hashed with bcrypt. Hashing is CPU-bound, so it runs in a
worker thread to keep the event loop free.
"""

import asyncio
from typing import Callable, Optional
import logging

import bcrypt

from taskboard.domain.errors import AuthenticationError, ConflictError, InvalidInputError, NotFoundError
from taskboard.domain.models import User
from taskboard.infra.config import get_settings
from taskboard.infra.unit_of_work import UnitOfWork
from taskboard.utils import clean_text

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("ascii"))


class UserService:
    """
    Account operations. Session handling (cookies, tokens) is up to the caller;
    this service only establishes who the user is.
    """

    def __init__(self, uow_factory: Optional[Callable[[], UnitOfWork]] = None,
                 bcrypt_rounds: Optional[int] = None):
        self._uow = uow_factory or UnitOfWork
        if bcrypt_rounds is None:
            bcrypt_rounds = get_settings().bcrypt_rounds
        self.bcrypt_rounds = bcrypt_rounds

    async def register(self, email: Optional[str], name: Optional[str], password: Optional[str]) -> User:
        """
        Register a new user.

        Args:
            email: Login email (trimmed and lower-cased before storing)
            name: Display name (trimmed)
            password: Plain-text password

        Raises:
            InvalidInputError: a field is empty or the password is too long
            ConflictError: email already registered
        """
        name = clean_text(name)
        email = clean_text(email).lower()
        if not name:
            raise InvalidInputError("name is empty", message_key="user.name_required")
        if not email:
            raise InvalidInputError("email is empty", message_key="user.email_required")
        if not isinstance(password, str) or not password:
            raise InvalidInputError("password is empty", message_key="user.password_required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError("password too long", message_key="user.password_too_long")

        password_hash = await asyncio.to_thread(hash_password, password, self.bcrypt_rounds)

        async with self._uow() as uow:
            if await uow.users.get_by_email(email) is not None:
                raise ConflictError(f"email {email}", message_key="user.email_taken", email=email)
            try:
                user = await uow.users.create(email, name, password_hash)
            except ConflictError as e:
                # Lost a race against a concurrent registration
                raise ConflictError(e.detail, message_key="user.email_taken", email=email) from e
        logger.info(f"User {user.id} registered")
        return user

    async def authenticate(self, email: Optional[str], password: Optional[str]) -> User:
        """
        Check credentials and return the matching user.

        Raises:
            AuthenticationError: unknown email or wrong password
        """
        email = clean_text(email).lower()
        if not email or not isinstance(password, str) or not password:
            raise AuthenticationError("missing credentials")

        async with self._uow() as uow:
            record = await uow.users.get_by_email(email)

        if record is None or not await asyncio.to_thread(verify_password, password, record.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError("bad credentials")
        return record.to_public()

    async def get_user(self, user_id: str) -> User:
        """
        Look up the profile of an authenticated user.

        Raises:
            NotFoundError: no such user
        """
        async with self._uow() as uow:
            user = await uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"user {user_id}", message_key="user.not_found")
        return user
