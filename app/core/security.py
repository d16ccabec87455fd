from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from app.core.config import settings
from app.core.database import Database, get_database
from app.core.errors import Unauthenticated, Unauthorized
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import upsert_user
from app.services.roles import UserRole

bearer_scheme = HTTPBearer(auto_error=False)


# Token generation
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expires_delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


# Token verification
def verify_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise Unauthenticated("Invalid or expired token")


def authenticate(token: str, database: Database) -> User:
    payload = verify_token(token)
    open_id = payload.get("sub")
    if not open_id:
        raise Unauthenticated("Invalid token payload")

    with database.session() as db:
        return upsert_user(
            db,
            open_id=open_id,
            name=payload.get("name"),
            email=payload.get("email"),
            login_method=payload.get("loginMethod"),
        )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    database: Database = Depends(get_database),
) -> User:
    if credentials is None:
        raise Unauthenticated()
    return authenticate(credentials.credentials, database)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    database: Database = Depends(get_database),
) -> Optional[User]:
    if credentials is None:
        return None
    return authenticate(credentials.credentials, database)


def require_admin(message: str) -> Callable[..., User]:
    """Build a dependency that lets only admin callers through."""

    def admin_guard(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != UserRole.admin:
            raise Unauthorized(message)
        return current_user

    return admin_guard
