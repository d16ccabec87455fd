from sqlalchemy import Column, DateTime, Enum, Integer, String, Text

from app.core.database import Base, utcnow
from app.services.roles import UserRole


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    # Identificador OAuth (sub do token), único por usuário
    open_id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False),
        nullable=False,
        default=UserRole.user,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)
    last_signed_in = Column(DateTime, nullable=False, default=utcnow)
