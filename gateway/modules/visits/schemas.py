from pydantic import BaseModel, ConfigDict
from typing import Optional, Union
from datetime import datetime


class SiteVisit(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    user_id: Optional[str] = None
    page_path: Optional[str] = None
    visited_at: Optional[datetime] = None


class VisitCreate(BaseModel):
    page_path: str = "/"
    user_id: Optional[str] = None


class VisitStats(BaseModel):
    total: int = 0
    today: int = 0
    this_week: int = 0
