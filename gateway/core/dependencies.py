"""
Core dependencies shared by the HTTP routes
"""

from fastapi import Depends, Header, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from gateway.core.errors import ErrorKind
from gateway.core.results import OperationResult, UploadResult
from gateway.facade import BackendGateway
from gateway.modules.auth.schemas import CurrentUser
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)

# Optional: anonymous callers may still read categories, materials and stats
security = HTTPBearer(auto_error=False)

STATUS_BY_KIND = {
    ErrorKind.NOT_CONFIGURED: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.SUSPENDED: status.HTTP_403_FORBIDDEN,
    ErrorKind.REMOTE: status.HTTP_400_BAD_REQUEST,
}


async def get_gateway(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    x_refresh_token: Optional[str] = Header(None),
) -> BackendGateway:
    """
    Gateway for this request only.

    Each request gets its own client, bound to the caller's bearer token when
    one is sent, so sessions never leak between callers.
    """
    gateway = BackendGateway(request.app.state.settings, client_factory=request.app.state.client_factory)
    await gateway.init()
    if credentials is not None and gateway.is_configured:
        result = await gateway.set_session(credentials.credentials, x_refresh_token)
        if not result.ok:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token"
            )
    return gateway


async def get_current_user(gateway: BackendGateway = Depends(get_gateway)) -> CurrentUser:
    """User behind the caller's token; 401 when none was sent"""
    user = await gateway.get_current_user()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return CurrentUser.model_validate(user)


def raise_for_error(result: Union[OperationResult, UploadResult]) -> Union[OperationResult, UploadResult]:
    """Turn a failed gateway result into an HTTPException carrying the tagged error"""
    if result.error is not None:
        logger.debug(f"Gateway error ({result.error.kind.value}): {result.error.message}")
        raise HTTPException(
            status_code=STATUS_BY_KIND[result.error.kind],
            detail=result.error.model_dump(mode="json")
        )
    return result
