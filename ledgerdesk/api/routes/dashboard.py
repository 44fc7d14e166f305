"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from ledgerdesk.api.dependencies import get_dashboard_use_case, get_user_context
from ledgerdesk.application.dto.responses import DashboardResponse
from ledgerdesk.application.use_cases import GetDashboardUseCase
from ledgerdesk.core.entities.context import UserContext

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    ctx: UserContext = Depends(get_user_context),
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
) -> DashboardResponse:
    """Invoice totals by status, expense total and tax deduction total."""
    result = await use_case.execute(ctx)
    return use_case.to_response(result)
