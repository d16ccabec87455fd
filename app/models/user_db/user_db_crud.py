from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import utcnow
from app.models.user_db.user_db import User
from app.services.roles import UserRole


def get_user_by_open_id(db: Session, open_id: str) -> Optional[User]:
    return db.query(User).filter(User.open_id == open_id).first()


def upsert_user(
    db: Session,
    open_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    login_method: Optional[str] = None,
    role: Optional[UserRole] = None,
    last_signed_in: Optional[datetime] = None,
) -> User:
    if not open_id:
        raise ValueError("User open_id is required for upsert")

    user = get_user_by_open_id(db, open_id)
    if not user:
        user = User(open_id=open_id)
        db.add(user)

    user.name = name if name is not None else user.name
    user.email = email if email is not None else user.email
    user.login_method = login_method if login_method is not None else user.login_method

    if role is not None:
        user.role = role
    elif settings.OWNER_OPEN_ID and open_id == settings.OWNER_OPEN_ID:
        user.role = UserRole.admin

    user.last_signed_in = last_signed_in or utcnow()

    db.commit()
    db.refresh(user)
    return user


def make_user_admin(db: Session, open_id: str) -> User:
    user = get_user_by_open_id(db, open_id)
    if not user:
        raise LookupError("User not found")
    user.role = UserRole.admin
    db.commit()
    db.refresh(user)
    return user
