"""
Password hashing, access tokens and the optional current user
"""
import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

import bcrypt
from jose import jwt, JWTError
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.models.user import User
from app.utils.date import utcnow

logger = logging.getLogger(__name__)

# Bearer credentials are optional; anonymous requests carry no user
security = HTTPBearer(auto_error=False)


# -------------------------
# PASSWORD UTILITIES
# -------------------------
def hash_password(password: str) -> str:
    """Hash a plain password"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash"""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


# -------------------------
# TOKENS
# -------------------------
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()

    if "sub" in to_encode and isinstance(to_encode["sub"], UUID):
        to_encode["sub"] = str(to_encode["sub"])

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": utcnow() + expires_delta, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Decode an access token, None when invalid, expired or of another type"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if payload.get("type") != "access":
        return None
    return payload


# -------------------------
# DEPENDENCY FUNCTIONS
# -------------------------
def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Current user from a bearer token, or None

    The user is also stored on the request context for downstream code.
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None or not payload.get("sub"):
        return None

    try:
        user_id = UUID(str(payload["sub"]))
    except ValueError:
        return None

    user = db.get(User, user_id)
    if user is None:
        logger.info(f"Token subject {user_id} does not match any user")
        return None

    ctx = getattr(request.state, "request_context", None)
    if ctx is not None:
        ctx.user = user
    return user
