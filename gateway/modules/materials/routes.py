from fastapi import APIRouter, Depends
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.materials.schemas import Material, MaterialCreate, MaterialUpdate
from typing import List

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=List[Material])
async def list_materials(
    include_unpublished: bool = False,
    gateway: BackendGateway = Depends(get_gateway)
):
    """Published materials; include_unpublished=true lists every status"""
    if include_unpublished:
        return await gateway.get_all_materials()
    return await gateway.get_materials()


@router.post("", response_model=OperationResult, status_code=201)
async def create_material(
    material_data: MaterialCreate,
    gateway: BackendGateway = Depends(get_gateway)
):
    result = await gateway.add_material(
        material_data.title,
        material_data.description,
        material_data.image_url,
        material_data.telegram_link,
        material_data.category
    )
    return raise_for_error(result)


@router.put("/{material_id}", response_model=OperationResult)
async def update_material(
    material_id: str,
    material_data: MaterialUpdate,
    gateway: BackendGateway = Depends(get_gateway)
):
    result = await gateway.update_material(material_id, material_data.model_dump(exclude_unset=True))
    return raise_for_error(result)


@router.delete("/{material_id}", response_model=OperationResult)
async def delete_material(material_id: str, gateway: BackendGateway = Depends(get_gateway)):
    return raise_for_error(await gateway.delete_material(material_id))
