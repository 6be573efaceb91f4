from fastapi import APIRouter, Depends, Response

from ....core.dependencies import get_dashboard_service
from ....domain.models import ApiResponse
from ....services.dashboard_service import DashboardService
from ..responses import with_status
from ..schemas.common import ApiEnvelope
from ..schemas.stats_schemas import DashboardStatsResponse

router = APIRouter(prefix="/api/stats", tags=["dashboard"])


@router.get("", response_model=ApiEnvelope[DashboardStatsResponse], response_model_exclude_none=True)
async def get_stats(
    response: Response,
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse:
    return with_status(response, await dashboard_service.get_stats())
