from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime


class CategoryCreate(BaseModel):
    name: str
    slug: str
    icon: Optional[str] = None
    description: Optional[str] = None


class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None


class Category(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    name: str
    slug: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
