"""
CookHub Backend — Stats Route
"""

from fastapi import APIRouter, Depends

from cookhub.database import Store, get_store
from cookhub.schemas.activity import StatsResponse
from cookhub.services.stats_service import stats_service

router = APIRouter(prefix="/api", tags=["Stats"])


@router.get("/stats", response_model=StatsResponse, summary="Platform row counts")
async def get_stats(store: Store = Depends(get_store)) -> StatsResponse:
    return await stats_service.get_stats(store)
