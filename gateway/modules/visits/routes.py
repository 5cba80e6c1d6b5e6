from fastapi import APIRouter, Depends
from gateway.facade import BackendGateway
from gateway.core.dependencies import get_gateway
from gateway.modules.visits.schemas import VisitCreate, VisitStats

router = APIRouter(prefix="/visits", tags=["visits"])


@router.post("", status_code=202)
async def track_visit(
    visit_data: VisitCreate,
    gateway: BackendGateway = Depends(get_gateway)
):
    """Record a page view; always accepted, failures are only logged"""
    await gateway.track_visit(visit_data.user_id, visit_data.page_path)
    return {"status": "accepted"}


@router.get("/stats", response_model=VisitStats)
async def visit_stats(gateway: BackendGateway = Depends(get_gateway)):
    return await gateway.get_visit_stats()
