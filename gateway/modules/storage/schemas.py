from pydantic import BaseModel
from typing import Optional


class FileUpload(BaseModel):
    """Raw file handed to the upload operations."""

    filename: str
    content: bytes
    content_type: Optional[str] = None
