"""
User records: creation and lookup
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.exceptions import UserValidationError
from app.core.security import hash_password, verify_password
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == (email or "").strip().lower()).first()


def create_user(db: Session, payload: UserCreate) -> User:
    """
    Store a user whose fields already passed UserCreate validation

    Raises:
        UserValidationError: email already taken
    """
    if find_by_email(db, payload.email) is not None:
        raise UserValidationError({"email": ["has already been taken"]})

    user = User(
        email=payload.email,
        password_hash=hash_password(payload.password),
        role=payload.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Created user {user.email}")
    return user


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = find_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user
