from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from gateway.core.dependencies import get_gateway, get_current_user, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.auth.schemas import SignUpRequest, SignInRequest, CurrentUser, TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=OperationResult, status_code=201)
async def register(
    register_data: SignUpRequest,
    gateway: BackendGateway = Depends(get_gateway)
):
    """Register a new user"""
    result = await gateway.sign_up(register_data.email, register_data.password, register_data.full_name)
    return raise_for_error(result)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: SignInRequest,
    gateway: BackendGateway = Depends(get_gateway)
):
    """
    Sign in and hand the session tokens to the caller.

    Send the access token back as ``Authorization: Bearer`` (and optionally
    the refresh token as ``X-Refresh-Token``). Suspended accounts get 403.
    """
    result = raise_for_error(await gateway.sign_in(login_data.email, login_data.password, login_data.page_path))
    auth_response = result.data
    if not auth_response.user or not auth_response.session:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return TokenResponse(
        access_token=auth_response.session.access_token,
        refresh_token=auth_response.session.refresh_token,
        user_id=auth_response.user.id,
        email=auth_response.user.email or login_data.email
    )


@router.post("/logout", response_model=OperationResult)
async def logout(gateway: BackendGateway = Depends(get_gateway)):
    """Revoke the caller's session"""
    return raise_for_error(await gateway.sign_out())


@router.get("/logout")
async def logout_and_redirect(gateway: BackendGateway = Depends(get_gateway)):
    """Revoke the caller's session and send the browser to the landing page"""
    return RedirectResponse(url=await gateway.handle_logout(), status_code=303)


@router.get("/me", response_model=CurrentUser)
async def me(current_user: CurrentUser = Depends(get_current_user)):
    """Identity behind the caller's token"""
    return current_user
