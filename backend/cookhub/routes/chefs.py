"""
CookHub Backend — Chef Route Handlers
"""

from typing import List

from fastapi import APIRouter, Depends

from cookhub.database import Store, get_store
from cookhub.routes.body import json_body, json_body_docs
from cookhub.schemas.catalog import ChefCreate, ChefResponse
from cookhub.services.catalog_service import catalog_service

router = APIRouter(prefix="/api", tags=["Chefs"])


@router.get("/chefs", response_model=List[ChefResponse], summary="List all chefs")
async def list_chefs(store: Store = Depends(get_store)) -> List[ChefResponse]:
    return await catalog_service.list_chefs(store)


@router.post(
    "/chefs",
    response_model=ChefResponse,
    summary="Create a chef",
    openapi_extra=json_body_docs(ChefCreate),
)
async def create_chef(
    payload: ChefCreate = Depends(json_body(ChefCreate)),
    store: Store = Depends(get_store),
) -> ChefResponse:
    return await catalog_service.create_chef(store, payload)
