from fastapi import APIRouter, Depends

from rental_manager.core.database import async_session_maker
from rental_manager.core.deps import get_current_claims
from rental_manager.schemas.auth import TokenClaims
from rental_manager.schemas.dashboard import DashboardResponse
from rental_manager.services.dashboard import build_summary

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(claims: TokenClaims = Depends(get_current_claims)):
    summary = await build_summary(async_session_maker, claims.id)
    return DashboardResponse(summary=summary)
