"""
CookHub Backend — User Route Handlers
=======================================

What:  Users, their chef subscriptions, enrollment history and
       personalised master class recommendations.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from cookhub.database import Store, get_store
from cookhub.routes.body import json_body, json_body_docs
from cookhub.schemas.activity import HistoryEntry, SubscriptionRequest, UserSubscriptionResponse
from cookhub.schemas.catalog import MasterClassResponse, UserCreate, UserResponse
from cookhub.schemas.common import ErrorResponse, StatusResponse
from cookhub.services.activity_service import activity_service
from cookhub.services.catalog_service import catalog_service
from cookhub.services.recommendation_service import recommendation_service

router = APIRouter(prefix="/api", tags=["Users"])

_USER_ID_REQUIRED = {400: {"description": "user_id missing", "model": ErrorResponse}}


@router.get("/users", response_model=List[UserResponse], summary="List all users")
async def list_users(store: Store = Depends(get_store)) -> List[UserResponse]:
    return await catalog_service.list_users(store)


@router.post(
    "/users",
    response_model=UserResponse,
    responses={500: {"description": "Duplicate username or email", "model": ErrorResponse}},
    summary="Create a user",
    openapi_extra=json_body_docs(UserCreate),
)
async def create_user(
    payload: UserCreate = Depends(json_body(UserCreate)),
    store: Store = Depends(get_store),
) -> UserResponse:
    return await catalog_service.create_user(store, payload)


@router.post(
    "/subscribe",
    response_model=StatusResponse,
    summary="Follow a chef",
    openapi_extra=json_body_docs(SubscriptionRequest),
)
async def subscribe(
    payload: SubscriptionRequest = Depends(json_body(SubscriptionRequest)),
    store: Store = Depends(get_store),
) -> StatusResponse:
    return await activity_service.subscribe(store, payload)


@router.get(
    "/user-history",
    response_model=List[HistoryEntry],
    responses=_USER_ID_REQUIRED,
    summary="A user's enrollments, newest first",
)
async def user_history(
    user_id: Optional[str] = Query(default=None),
    store: Store = Depends(get_store),
) -> List[HistoryEntry]:
    return await activity_service.user_history(store, user_id)


@router.get(
    "/user-subscriptions",
    response_model=List[UserSubscriptionResponse],
    responses=_USER_ID_REQUIRED,
    summary="Chefs a user follows",
)
async def user_subscriptions(
    user_id: Optional[str] = Query(default=None),
    store: Store = Depends(get_store),
) -> List[UserSubscriptionResponse]:
    return await activity_service.user_subscriptions(store, user_id)


@router.get(
    "/recommendations",
    response_model=List[MasterClassResponse],
    responses=_USER_ID_REQUIRED,
    summary="Upcoming master classes matching a user's subscriptions and preferences",
)
async def recommendations(
    user_id: Optional[str] = Query(default=None),
    store: Store = Depends(get_store),
) -> List[MasterClassResponse]:
    return await recommendation_service.recommend(store, user_id)
