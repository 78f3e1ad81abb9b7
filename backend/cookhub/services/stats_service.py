"""
CookHub Backend — Platform Statistics
=======================================

Five independent row counts. Each count runs in its own session; one that
fails is logged and reported as 0 while the others are still returned.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from cookhub.database import Store
from cookhub.models import Chef, MasterClass, Recipe, User, UserHistory
from cookhub.schemas.activity import StatsResponse

logger = logging.getLogger(__name__)

COUNTED = {
    "total_recipes": Recipe,
    "total_chefs": Chef,
    "total_users": User,
    "total_master_classes": MasterClass,
    "total_enrollments": UserHistory,
}


class StatsService:
    async def _count(self, store: Store, model) -> int:
        async with store.session() as session:
            return (await session.execute(select(func.count(model.id)))).scalar() or 0

    async def get_stats(self, store: Store) -> StatsResponse:
        totals = {}
        for key, model in COUNTED.items():
            try:
                totals[key] = await self._count(store, model)
            except SQLAlchemyError as e:
                logger.error("Error counting %s: %s", model.__tablename__, e)
                totals[key] = 0
        return StatsResponse(**totals)


stats_service = StatsService()
