from typing import Optional

from fastapi import APIRouter, Depends

from app.core.security import get_optional_user
from app.models.user_db.user_db import User
from app.schemas.users.user_out import UserOut

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.get("/me", response_model=Optional[UserOut])
def get_me(current_user: Optional[User] = Depends(get_optional_user)):
    return current_user
