"""
CookHub Backend — Catalog Service
===================================

What:  List/create operations for chefs, users and master classes.
How:   Full-table selects; master classes are joined to chefs for the chef's
       name and ordered by scheduled datetime ascending. Creates insert the
       body as given and return the row with its store-assigned id.

No validation happens here beyond what the schema enforces: an empty title
or name is stored as an empty string; a duplicate username/email violates
the UNIQUE constraint and surfaces as DatabaseError.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from cookhub.database import Store
from cookhub.exceptions import DatabaseError
from cookhub.models import Chef, MasterClass, User
from cookhub.schemas.catalog import (
    ChefCreate,
    ChefResponse,
    MasterClassCreate,
    MasterClassResponse,
    UserCreate,
    UserResponse,
)

logger = logging.getLogger(__name__)


def master_class_response(master_class: MasterClass, chef_name: Optional[str]) -> MasterClassResponse:
    return MasterClassResponse(
        id=master_class.id,
        title=master_class.title,
        chef_id=master_class.chef_id,
        chef_name=chef_name,
        scheduled_at=master_class.scheduled_at,
        duration=master_class.duration,
        price=master_class.price,
        max_students=master_class.max_students,
        description=master_class.description,
    )


class CatalogService:
    """Business logic for /api/chefs, /api/users and /api/masterclasses."""

    # ── Chefs ─────────────────────────────────────────────────────────────
    async def list_chefs(self, store: Store) -> List[ChefResponse]:
        try:
            async with store.session() as session:
                chefs = (await session.execute(select(Chef).order_by(Chef.id))).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Error querying chefs: %s", e)
            raise DatabaseError(context={"operation": "list_chefs"})
        return [ChefResponse.model_validate(chef) for chef in chefs]

    async def create_chef(self, store: Store, payload: ChefCreate) -> ChefResponse:
        try:
            async with store.session() as session:
                chef = Chef(**payload.model_dump())
                session.add(chef)
                await session.flush()
        except SQLAlchemyError as e:
            logger.error("Error creating chef: %s", e)
            raise DatabaseError(context={"operation": "create_chef"})
        logger.info("Chef %d created: %s", chef.id, chef.name)
        return ChefResponse.model_validate(chef)

    # ── Users ─────────────────────────────────────────────────────────────
    async def list_users(self, store: Store) -> List[UserResponse]:
        try:
            async with store.session() as session:
                users = (await session.execute(select(User).order_by(User.id))).scalars().all()
        except SQLAlchemyError as e:
            logger.error("Error querying users: %s", e)
            raise DatabaseError(context={"operation": "list_users"})
        return [UserResponse.model_validate(user) for user in users]

    async def create_user(self, store: Store, payload: UserCreate) -> UserResponse:
        try:
            async with store.session() as session:
                user = User(**payload.model_dump())
                session.add(user)
                await session.flush()
        except SQLAlchemyError as e:
            logger.error("Error creating user %r: %s", payload.username, e)
            raise DatabaseError(context={"operation": "create_user"})
        logger.info("User %d created: %s", user.id, user.username)
        return UserResponse.model_validate(user)

    # ── Master Classes ────────────────────────────────────────────────────
    async def list_master_classes(self, store: Store) -> List[MasterClassResponse]:
        stmt = (
            select(MasterClass, Chef.name)
            .join(Chef, MasterClass.chef_id == Chef.id)
            .order_by(MasterClass.scheduled_at, MasterClass.id)
        )
        try:
            async with store.session() as session:
                rows = (await session.execute(stmt)).all()
        except SQLAlchemyError as e:
            logger.error("Error querying master classes: %s", e)
            raise DatabaseError(context={"operation": "list_master_classes"})
        return [master_class_response(mc, chef_name) for mc, chef_name in rows]

    async def create_master_class(
        self, store: Store, payload: MasterClassCreate
    ) -> MasterClassResponse:
        try:
            async with store.session() as session:
                master_class = MasterClass(**payload.model_dump())
                session.add(master_class)
                await session.flush()
                chef_name = await session.scalar(
                    select(Chef.name).where(Chef.id == master_class.chef_id)
                )
        except SQLAlchemyError as e:
            logger.error("Error creating master class: %s", e)
            raise DatabaseError(context={"operation": "create_master_class"})
        logger.info("Master class %d created: %s", master_class.id, master_class.title)
        return master_class_response(master_class, chef_name)


# ── Singleton Instance ────────────────────────────────────────────────────
catalog_service = CatalogService()
