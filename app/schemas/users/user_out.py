from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from app.schemas.common.camel_model import CamelModel
from app.services.roles import UserRole


class UserOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: UserRole
    created_at: datetime
    last_signed_in: datetime
