"""
CookHub Backend — Master Class Route Handlers
===============================================

What:  Master class listing/creation and enrollment.

Enrollment answers:
    200 {"status": "enrolled"}   seat taken (or user already enrolled)
    409 capacity_exceeded        class is full, nothing written
    404 not_found                unknown master class id
"""

from typing import List

from fastapi import APIRouter, Depends

from cookhub.database import Store, get_store
from cookhub.routes.body import json_body, json_body_docs
from cookhub.schemas.activity import EnrollmentRequest
from cookhub.schemas.catalog import MasterClassCreate, MasterClassResponse
from cookhub.schemas.common import ErrorResponse, StatusResponse
from cookhub.services.activity_service import activity_service
from cookhub.services.catalog_service import catalog_service

router = APIRouter(prefix="/api", tags=["Master Classes"])


@router.get(
    "/masterclasses",
    response_model=List[MasterClassResponse],
    summary="List master classes, soonest first",
)
async def list_master_classes(store: Store = Depends(get_store)) -> List[MasterClassResponse]:
    return await catalog_service.list_master_classes(store)


@router.post(
    "/masterclasses",
    response_model=MasterClassResponse,
    summary="Create a master class",
    openapi_extra=json_body_docs(MasterClassCreate),
)
async def create_master_class(
    payload: MasterClassCreate = Depends(json_body(MasterClassCreate)),
    store: Store = Depends(get_store),
) -> MasterClassResponse:
    return await catalog_service.create_master_class(store, payload)


@router.post(
    "/enroll",
    response_model=StatusResponse,
    responses={
        404: {"description": "Unknown master class", "model": ErrorResponse},
        409: {"description": "No available spots", "model": ErrorResponse},
    },
    summary="Enroll a user into a master class",
    openapi_extra=json_body_docs(EnrollmentRequest),
)
async def enroll(
    payload: EnrollmentRequest = Depends(json_body(EnrollmentRequest)),
    store: Store = Depends(get_store),
) -> StatusResponse:
    return await activity_service.enroll(store, payload)
