from fastapi import APIRouter, Depends, File, Form, UploadFile
from gateway.core.dependencies import get_gateway, raise_for_error
from gateway.core.results import UploadResult
from gateway.facade import BackendGateway
from gateway.modules.storage.schemas import FileUpload
from typing import Optional

router = APIRouter(prefix="/uploads", tags=["uploads"])


async def _read_upload(file: UploadFile) -> FileUpload:
    return FileUpload(
        filename=file.filename or "upload",
        content=await file.read(),
        content_type=file.content_type
    )


@router.post("/images", response_model=UploadResult, status_code=201)
async def upload_image(
    file: UploadFile = File(...),
    bucket: Optional[str] = Form(None),
    gateway: BackendGateway = Depends(get_gateway)
):
    """Upload an image (material-images bucket unless another is given)"""
    result = await gateway.upload_image(await _read_upload(file), bucket)
    return raise_for_error(result)


@router.post("/avatar", response_model=UploadResult, status_code=201)
async def upload_avatar(
    file: UploadFile = File(...),
    gateway: BackendGateway = Depends(get_gateway)
):
    """Replace the signed-in user's avatar"""
    result = await gateway.upload_avatar(await _read_upload(file))
    return raise_for_error(result)
