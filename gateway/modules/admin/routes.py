from fastapi import APIRouter, Depends
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.admin.schemas import AdminUser, BanStatus, UserRoleUpdate
from typing import List, Optional

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/is-admin")
async def is_admin(gateway: BackendGateway = Depends(get_gateway)):
    return {"is_admin": await gateway.is_admin()}


@router.get("/ban-status", response_model=Optional[BanStatus])
async def ban_status(gateway: BackendGateway = Depends(get_gateway)):
    """Active ban of the signed-in user, or null"""
    return await gateway.check_user_ban()


@router.get("/users", response_model=List[AdminUser])
async def list_users(gateway: BackendGateway = Depends(get_gateway)):
    """All users; the get_all_users_admin RPC decides who may see them"""
    return await gateway.get_all_users()


@router.put("/users/{user_id}/role", response_model=OperationResult)
async def update_user_role(
    user_id: str,
    role_data: UserRoleUpdate,
    gateway: BackendGateway = Depends(get_gateway)
):
    return raise_for_error(await gateway.update_user_role(user_id, role_data.role))
