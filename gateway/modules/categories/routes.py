from fastapi import APIRouter, Depends
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import OperationResult
from gateway.facade import BackendGateway
from gateway.modules.categories.schemas import Category, CategoryCreate, CategoryUpdate
from typing import List

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[Category])
async def list_categories(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.get_categories()


@router.post("", response_model=OperationResult, status_code=201)
async def create_category(
    category_data: CategoryCreate,
    gateway: BackendGateway = Depends(get_gateway)
):
    result = await gateway.add_category(
        category_data.name,
        category_data.slug,
        category_data.icon,
        category_data.description
    )
    return raise_for_error(result)


@router.put("/{category_id}", response_model=OperationResult)
async def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    gateway: BackendGateway = Depends(get_gateway)
):
    result = await gateway.update_category(category_id, category_data.model_dump(exclude_unset=True))
    return raise_for_error(result)


@router.delete("/{category_id}", response_model=OperationResult)
async def delete_category(category_id: str, gateway: BackendGateway = Depends(get_gateway)):
    return raise_for_error(await gateway.delete_category(category_id))
