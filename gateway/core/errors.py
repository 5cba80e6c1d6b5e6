"""
Tagged errors returned by gateway operations.

Local precondition failures (not configured, not authenticated, suspended)
and errors reported by Supabase share one shape, but carry a ``kind`` so
callers can branch without parsing message text.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

NOT_CONFIGURED_MESSAGE = "Supabase not configured"
NOT_AUTHENTICATED_MESSAGE = "Not authenticated"


class ErrorKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    NOT_AUTHENTICATED = "not_authenticated"
    SUSPENDED = "suspended"
    REMOTE = "remote"


class GatewayError(BaseModel):
    kind: ErrorKind
    message: str
    code: Optional[str] = None

    @classmethod
    def not_configured(cls) -> "GatewayError":
        return cls(kind=ErrorKind.NOT_CONFIGURED, message=NOT_CONFIGURED_MESSAGE)

    @classmethod
    def not_authenticated(cls) -> "GatewayError":
        return cls(kind=ErrorKind.NOT_AUTHENTICATED, message=NOT_AUTHENTICATED_MESSAGE)

    @classmethod
    def suspended(
        cls,
        reason: Optional[str],
        ban_until: Optional[datetime],
        date_format: str = "%x",
    ) -> "GatewayError":
        """Account suspension notice; expiry is rendered in local time."""
        message = f"Your account has been suspended. Reason: {reason}"
        if ban_until is not None:
            message += f" Until: {ban_until.astimezone().strftime(date_format)}"
        else:
            message += " (Permanent)"
        return cls(kind=ErrorKind.SUSPENDED, message=message)

    @classmethod
    def remote(cls, exc: Exception) -> "GatewayError":
        """Wrap an exception raised by the Supabase SDK (postgrest, auth, storage)."""
        code = getattr(exc, "code", None)
        message = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
        return cls(
            kind=ErrorKind.REMOTE,
            message=str(message),
            code=str(code) if code is not None else None,
        )
