"""
Password hashing and back-office user creation
"""
import logging

import bcrypt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.models import User, UserRole

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash password using bcrypt"""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def create_user(db: Session, username: str, password: str, role=UserRole.SUPPORT) -> User:
    """Insert a back-office user; a taken username raises the engine's IntegrityError"""
    user = User(username=username, password_hash=hash_password(password), role=UserRole(role))
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Error creating user {username}: {e}")
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Created user {username} with role {user.role.value}")
    return user
