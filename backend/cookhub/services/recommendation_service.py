"""
CookHub Backend — Recommendation Engine
=========================================

What:  Picks upcoming master classes for a user.
How:   1. Read the user's preference string (missing user → no preferences)
       2. Read the chef ids the user subscribes to
       3. Build the master class query with RecommendationQuery
       4. Order by scheduled time, cap at `recommendation_limit`

Steps 1 and 2 are best-effort: a failed lookup is logged and treated as
"nothing known", which widens the result instead of failing the request.

Filter precedence (RecommendationQuery.predicates):
    always:                    datetime > now
    subscriptions + prefs:     AND (chef_id IN (...) OR speciality LIKE %prefs%)
    subscriptions only:        AND chef_id IN (...)
    prefs only:                AND speciality LIKE %prefs%
    neither:                   no extra filter

The preference string is matched whole; "italian,european" only matches a
speciality containing that exact text.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import Select, or_, select
from sqlalchemy.exc import SQLAlchemyError

from cookhub.config import settings
from cookhub.database import Store
from cookhub.exceptions import DatabaseError
from cookhub.models import Chef, MasterClass, Subscription, User
from cookhub.schemas.catalog import MasterClassResponse
from cookhub.services.catalog_service import master_class_response
from cookhub.services.params import as_id, require_param

logger = logging.getLogger(__name__)

NOW_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> str:
    """Current UTC time in the text form master class datetimes are compared against."""
    return datetime.now(timezone.utc).strftime(NOW_FORMAT)


class RecommendationQuery:
    """
    Builder for the recommendation SELECT.

    Example:
        stmt = (
            RecommendationQuery(now="2030-01-01 00:00:00", limit=10)
            .subscribed_to([1, 3])
            .preferring("italian")
            .build()
        )
    """

    def __init__(self, now: str, limit: int = 10):
        self.now = now
        self.limit = limit
        self.chef_ids: List[int] = []
        self.preferences = ""

    def subscribed_to(self, chef_ids: Sequence[int]) -> "RecommendationQuery":
        self.chef_ids = list(chef_ids)
        return self

    def preferring(self, preferences: Optional[str]) -> "RecommendationQuery":
        self.preferences = preferences or ""
        return self

    def predicates(self) -> list:
        """Ordered WHERE clauses; the first one always restricts to future classes."""
        clauses = [MasterClass.scheduled_at > self.now]

        by_chef = MasterClass.chef_id.in_(self.chef_ids) if self.chef_ids else None
        by_taste = Chef.speciality.like(f"%{self.preferences}%") if self.preferences else None

        if by_chef is not None and by_taste is not None:
            clauses.append(or_(by_chef, by_taste))
        elif by_chef is not None:
            clauses.append(by_chef)
        elif by_taste is not None:
            clauses.append(by_taste)
        return clauses

    def build(self) -> Select:
        return (
            select(MasterClass, Chef.name)
            .join(Chef, MasterClass.chef_id == Chef.id)
            .where(*self.predicates())
            .order_by(MasterClass.scheduled_at, MasterClass.id)
            .limit(self.limit)
        )


class RecommendationService:
    def __init__(self, limit: int = 10):
        self.limit = limit

    async def _preferences(self, store: Store, user_id: Optional[int]) -> str:
        if user_id is None:
            return ""
        try:
            async with store.session() as session:
                prefs = (
                    await session.execute(select(User.preferences).where(User.id == user_id))
                ).scalar()
        except SQLAlchemyError as e:
            logger.warning("Error getting preferences for user %s: %s", user_id, e)
            return ""
        return prefs or ""

    async def _subscribed_chefs(self, store: Store, user_id: Optional[int]) -> List[int]:
        if user_id is None:
            return []
        try:
            async with store.session() as session:
                rows = await session.execute(
                    select(Subscription.chef_id)
                    .where(Subscription.user_id == user_id)
                    .order_by(Subscription.id)
                )
                return [chef_id for chef_id in rows.scalars() if chef_id is not None]
        except SQLAlchemyError as e:
            logger.warning("Error getting subscriptions for user %s: %s", user_id, e)
            return []

    async def recommend(
        self,
        store: Store,
        user_id: Optional[str],
        now: Optional[str] = None,
    ) -> List[MasterClassResponse]:
        """
        Upcoming master classes for a user, soonest first.

        Args:
            store:   Store to query
            user_id: raw query parameter; missing/empty raises ValidationError
            now:     comparison timestamp, defaults to the current UTC time
        """
        uid = as_id(require_param(user_id, "user_id"))

        query = (
            RecommendationQuery(now=now or utc_now(), limit=self.limit)
            .subscribed_to(await self._subscribed_chefs(store, uid))
            .preferring(await self._preferences(store, uid))
        )

        try:
            async with store.session() as session:
                rows = (await session.execute(query.build())).all()
        except SQLAlchemyError as e:
            logger.error("Error querying recommendations for user %s: %s", user_id, e)
            raise DatabaseError(context={"operation": "recommendations"})

        return [master_class_response(master_class, chef_name) for master_class, chef_name in rows]


# ── Singleton Instance ────────────────────────────────────────────────────
recommendation_service = RecommendationService(limit=settings.recommendation_limit)
