from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime

PUBLISHED = "published"


class MaterialCreate(BaseModel):
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    telegram_link: Optional[str] = None
    category: Optional[str] = None


class MaterialUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    telegram_link: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None


class Material(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    telegram_link: Optional[str] = None
    category: Optional[Union[int, str]] = None
    created_by: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
