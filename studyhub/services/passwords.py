"""Password hashing with bcrypt."""

import asyncio
import logging

from passlib.context import CryptContext

from studyhub.config import get_settings
from studyhub.services.errors import InfrastructureError

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Digests that passlib cannot identify verify as False.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        logger.warning(f"Unusable password digest: {e}")
        return False


async def hash_password_async(password: str) -> str:
    """Hash in a worker thread so the event loop keeps serving requests."""
    try:
        return await asyncio.to_thread(hash_password, password)
    except ValueError as e:
        logger.error(f"Password hashing failed: {e}")
        raise InfrastructureError() from e


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    """Verify in a worker thread."""
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)
