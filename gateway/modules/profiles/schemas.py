from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime


class Profile(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None
    is_banned: Optional[bool] = None
    created_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
