"""Credential store and signup/login flow."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from studyhub.models.user import User
from studyhub.services.errors import AuthError, ConflictError, NotFoundError
from studyhub.services.passwords import hash_password_async, verify_password_async
from studyhub.services.subscriptions import normalize_email

logger = logging.getLogger(__name__)


def find_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def insert(db: Session, name: str, mobile: str, email: str, password_hash: str) -> User:
    """Insert a user row.

    The unique constraint on emailid rejects duplicates, including a
    concurrent signup that passed the lookup in create_user.
    """
    email = normalize_email(email)
    user = User(name=name, mobile=mobile, email=email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Signup lost unique race for '{email}'")
        raise ConflictError("Email exists") from None
    db.refresh(user)
    return user


async def create_user(db: Session, name: str, mobile: str, email: str, password: str) -> User:
    """Hash the password and store a new user.

    Known emails are rejected before spending time on bcrypt.
    """
    if find_by_email(db, email):
        raise ConflictError("Email exists")

    password_hash = await hash_password_async(password)
    user = insert(db, name, mobile, email, password_hash)
    logger.info(f"Registered user {user.user_id}")
    return user


async def authenticate_user(db: Session, email: str, password: str) -> User:
    """Check credentials, raising NotFoundError or AuthError on failure."""
    user = find_by_email(db, email)
    if not user:
        raise NotFoundError("User not found")
    if not await verify_password_async(password, user.password_hash):
        logger.warning(f"Incorrect password for user {user.user_id}")
        raise AuthError("Incorrect password")
    return user
