from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime

TEMPORARY = "temporary"
PERMANENT = "permanent"


class BanRequest(BaseModel):
    reason: Optional[str] = None
    ban_type: str = PERMANENT
    duration: Optional[int] = None  # days, temporary bans only


class UserBan(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    user_id: str
    banned_by: Optional[str] = None
    reason: Optional[str] = None
    ban_type: Optional[str] = None
    ban_until: Optional[datetime] = None
    is_active: bool = False
    created_at: Optional[datetime] = None
