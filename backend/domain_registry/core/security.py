# domain_registry/core/security.py
import time
from typing import Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from domain_registry.core.config import settings
from domain_registry.core.exceptions import AuthError, AuthErrorKind

_hasher = PasswordHasher()
_bearer = HTTPBearer(auto_error=False)


class Claims(BaseModel):
    username: str
    exp: int

    def __str__(self):
        return f"username: {self.username!r}"


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored argon2 hash."""
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(username: str, ttl_seconds: Optional[int] = None) -> str:
    ttl = settings.ACCESS_TOKEN_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    claims = Claims(username=username, exp=int(time.time()) + ttl)
    try:
        return jwt.encode(claims.model_dump(), settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        raise AuthError(AuthErrorKind.TOKEN_CREATION) from e


def decode_access_token(token: str) -> Claims:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        return Claims(**payload)
    except (jwt.PyJWTError, ValueError, TypeError) as e:
        raise AuthError(AuthErrorKind.INVALID_TOKEN) from e


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Claims:
    """Claims of the bearer token on the request."""
    if credentials is None:
        raise AuthError(AuthErrorKind.INVALID_TOKEN)
    return decode_access_token(credentials.credentials)
