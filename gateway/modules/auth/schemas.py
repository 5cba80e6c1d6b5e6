from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Any, Dict, Optional


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None


class SignInRequest(BaseModel):
    email: EmailStr
    password: str
    page_path: str = "/"  # page the sign in happened on, recorded as a visit


class CurrentUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: Optional[str] = None
    user_metadata: Dict[str, Any] = {}


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
    user_id: str
    email: Optional[str] = None
