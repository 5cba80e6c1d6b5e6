from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime


class BanStatus(BaseModel):
    """Row returned by the ``get_user_ban_status`` RPC for the signed-in user."""

    model_config = ConfigDict(extra="allow")

    is_active: bool = False
    reason: Optional[str] = None
    ban_type: Optional[str] = None
    ban_until: Optional[datetime] = None


class AdminUser(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None
    is_banned: Optional[bool] = None
    created_at: Optional[datetime] = None


class UserRoleUpdate(BaseModel):
    role: str
