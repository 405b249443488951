"""
Password hashing, JWT handling and the current-user dependency
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from oms.config import settings
from oms.database import get_db
from oms.errors import SessionExpiredError, UnauthorizedError
from oms.models.user import User
from oms.repositories.user_repository import UserRepository

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Defines the expected header format (Bearer <token>)
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return _pwd_context.verify(plain, hashed)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Creates a JWT access token with a UTC expiration."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Decodes and verifies the JWT
    
    Raises:
        SessionExpiredError: If the token has expired
        UnauthorizedError: If the token is malformed or badly signed
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise SessionExpiredError()
    except JWTError:
        raise UnauthorizedError("Token is not valid")


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Dependency resolving the authenticated user for this request"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("No authentication token, access denied")
    
    payload = decode_access_token(credentials.credentials)
    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise UnauthorizedError("Token is not valid")
    
    user = UserRepository(db).get_by_id(int(user_id))
    if not user:
        raise UnauthorizedError("User not found")
    return user
