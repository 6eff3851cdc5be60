"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from kitchen_inventory.api.serializers import analytics_to_dict
from kitchen_inventory.domain.errors import AnalyticsUnavailableError

if TYPE_CHECKING:
    from kitchen_inventory.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/analytics", dependencies=[Depends(require_admin)])
async def admin_analytics(request: Request) -> dict[str, object]:
    """Return recipe analytics, cost estimates and recommendations."""
    container: AppContainer = request.app.state.container
    try:
        analytics = await container.report_service.get_admin_analytics()
    except AnalyticsUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Analytics are temporarily unavailable",
        ) from exc
    return analytics_to_dict(analytics)

