from fastapi import APIRouter, Depends, HTTPException
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.profiles.schemas import Profile, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/{user_id}", response_model=Profile)
async def get_profile(user_id: str, gateway: BackendGateway = Depends(get_gateway)):
    profile = await gateway.get_user_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.patch("/me", response_model=OperationResult)
async def update_my_profile(
    updates: ProfileUpdate,
    gateway: BackendGateway = Depends(get_gateway)
):
    """Partially update the signed-in user's profile"""
    result = await gateway.update_profile(updates.model_dump(exclude_unset=True))
    return raise_for_error(result)
