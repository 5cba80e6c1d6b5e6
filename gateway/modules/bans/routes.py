from fastapi import APIRouter, Depends
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.bans.schemas import BanRequest, UserBan
from typing import List

router = APIRouter(prefix="/users", tags=["bans"])


@router.post("/{user_id}/ban", response_model=OperationResult, status_code=201)
async def ban_user(
    user_id: str,
    ban_data: BanRequest,
    gateway: BackendGateway = Depends(get_gateway)
):
    result = await gateway.ban_user(user_id, ban_data.reason, ban_data.ban_type, ban_data.duration)
    return raise_for_error(result)


@router.delete("/{user_id}/ban", response_model=OperationResult)
async def unban_user(user_id: str, gateway: BackendGateway = Depends(get_gateway)):
    return raise_for_error(await gateway.unban_user(user_id))


@router.get("/{user_id}/bans", response_model=List[UserBan])
async def ban_history(user_id: str, gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.get_user_ban_history(user_id)
