"""
CookHub Backend — Activity Service (Subscriptions & Enrollments)
==================================================================

What:  Follow a chef, enroll in a master class, and read a user's history
       and subscriptions.

Enrollment Flow (POST /api/enroll):
    ┌────────────────┐    ┌──────────────────────┐    ┌──────────────────┐
    │ acquire store  │───▶│ capacity query       │───▶│ INSERT OR IGNORE │
    │ enrollment lock│    │ COUNT(history), max  │    │ into user_history│
    └────────────────┘    └──────────────────────┘    └──────────────────┘
                                   │ count >= max
                                   ▼
                          CapacityExceededError (409), nothing written

    The capacity query is one statement:
        SELECT COUNT(uh.id), mc.max_students
        FROM master_classes mc LEFT JOIN user_history uh ON mc.id = uh.master_class_id
        WHERE mc.id = ? GROUP BY mc.id, mc.max_students

    Check and insert share one transaction and run under `store.enrollment_lock`,
    so concurrent requests served by this process cannot overshoot capacity.
    Several server processes writing the same file are not coordinated.

Unknown master class:
    The capacity query returns no row. With `unknown_class_as_not_found`
    (default) this is a 404; otherwise the class is treated as having zero
    seats and the request gets a 409.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from cookhub.config import settings
from cookhub.database import Store
from cookhub.exceptions import CapacityExceededError, DatabaseError, NotFoundError
from cookhub.models import Chef, MasterClass, Subscription, UserHistory
from cookhub.schemas.activity import (
    EnrollmentRequest,
    HistoryEntry,
    SubscriptionRequest,
    UserSubscriptionResponse,
)
from cookhub.schemas.common import StatusResponse
from cookhub.services.params import as_id, require_param

logger = logging.getLogger(__name__)


class ActivityService:
    """
    Business logic for subscriptions and master class enrollments.

    Args:
        unknown_class_as_not_found: answer enrollments for a missing master
                                    class with 404 instead of 409
    """

    def __init__(self, unknown_class_as_not_found: bool = True):
        self.unknown_class_as_not_found = unknown_class_as_not_found

    async def subscribe(self, store: Store, payload: SubscriptionRequest) -> StatusResponse:
        """Idempotent follow: a repeated (user, chef) pair leaves one row."""
        stmt = (
            sqlite_insert(Subscription)
            .values(user_id=payload.user_id, chef_id=payload.chef_id)
            .on_conflict_do_nothing()
        )
        try:
            async with store.session() as session:
                await session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(
                "Error creating subscription user=%s chef=%s: %s",
                payload.user_id, payload.chef_id, e,
            )
            raise DatabaseError(context={"operation": "subscribe"})
        return StatusResponse(status="subscribed")

    async def _capacity(self, session, master_class_id: int) -> Optional[tuple]:
        stmt = (
            select(func.count(UserHistory.id), MasterClass.max_students)
            .select_from(MasterClass)
            .outerjoin(UserHistory, MasterClass.id == UserHistory.master_class_id)
            .where(MasterClass.id == master_class_id)
            .group_by(MasterClass.id, MasterClass.max_students)
        )
        return (await session.execute(stmt)).first()

    async def enroll(self, store: Store, payload: EnrollmentRequest) -> StatusResponse:
        """
        Register a user for a master class if a seat is free.

        Raises:
            NotFoundError:          master class does not exist (→ 404)
            CapacityExceededError:  enrolled count >= max_students (→ 409)
            DatabaseError:          store failure (→ 500)
        """
        class_id = payload.master_class_id
        try:
            async with store.enrollment_lock:
                async with store.session() as session:
                    row = await self._capacity(session, class_id)
                    if row is None:
                        if self.unknown_class_as_not_found:
                            raise NotFoundError(resource="master class", resource_id=str(class_id))
                        enrolled, capacity = 0, 0
                    else:
                        enrolled, capacity = row[0], row[1] or 0

                    if enrolled >= capacity:
                        logger.info(
                            "Master class %s is full (%d/%d), rejecting user %s",
                            class_id, enrolled, capacity, payload.user_id,
                        )
                        raise CapacityExceededError(
                            master_class_id=class_id,
                            enrolled=enrolled,
                            capacity=capacity,
                        )

                    await session.execute(
                        sqlite_insert(UserHistory)
                        .values(user_id=payload.user_id, master_class_id=class_id)
                        .on_conflict_do_nothing()
                    )
        except SQLAlchemyError as e:
            logger.error(
                "Error enrolling user %s into master class %s: %s",
                payload.user_id, class_id, e,
            )
            raise DatabaseError(context={"operation": "enroll", "master_class_id": class_id})

        logger.info("User %s enrolled into master class %s", payload.user_id, class_id)
        return StatusResponse(status="enrolled")

    async def user_history(self, store: Store, user_id: Optional[str]) -> List[HistoryEntry]:
        """A user's enrollments, newest first, with class title and chef name."""
        uid = as_id(require_param(user_id, "user_id"))
        if uid is None:
            return []

        stmt = (
            select(
                UserHistory.id,
                UserHistory.user_id,
                UserHistory.master_class_id,
                MasterClass.title,
                Chef.name,
                UserHistory.attended_at,
            )
            .join(MasterClass, UserHistory.master_class_id == MasterClass.id)
            .join(Chef, MasterClass.chef_id == Chef.id)
            .where(UserHistory.user_id == uid)
            .order_by(UserHistory.attended_at.desc(), UserHistory.id.desc())
        )
        try:
            async with store.session() as session:
                rows = (await session.execute(stmt)).all()
        except SQLAlchemyError as e:
            logger.error("Error querying user history for %s: %s", user_id, e)
            raise DatabaseError(context={"operation": "user_history"})

        return [
            HistoryEntry(
                id=row[0],
                user_id=row[1],
                master_class_id=row[2],
                class_title=row[3],
                chef_name=row[4],
                attended_at=row[5],
            )
            for row in rows
        ]

    async def user_subscriptions(
        self, store: Store, user_id: Optional[str]
    ) -> List[UserSubscriptionResponse]:
        uid = as_id(require_param(user_id, "user_id"))
        if uid is None:
            return []

        stmt = (
            select(
                Subscription.id,
                Subscription.user_id,
                Subscription.chef_id,
                Chef.name,
                Chef.speciality,
                Chef.rating,
            )
            .join(Chef, Subscription.chef_id == Chef.id)
            .where(Subscription.user_id == uid)
            .order_by(Subscription.id)
        )
        try:
            async with store.session() as session:
                rows = (await session.execute(stmt)).all()
        except SQLAlchemyError as e:
            logger.error("Error querying subscriptions for %s: %s", user_id, e)
            raise DatabaseError(context={"operation": "user_subscriptions"})

        return [
            UserSubscriptionResponse(
                id=row[0],
                user_id=row[1],
                chef_id=row[2],
                chef_name=row[3],
                speciality=row[4],
                chef_rating=row[5],
            )
            for row in rows
        ]


# ── Singleton Instance ────────────────────────────────────────────────────
activity_service = ActivityService(
    unknown_class_as_not_found=settings.enroll_unknown_class_as_not_found,
)
