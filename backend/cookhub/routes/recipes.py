"""
CookHub Backend — Recipe Route Handlers
=========================================

What:  Recipe listing, creation, substring search and shopping lists.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from cookhub.database import Store, get_store
from cookhub.routes.body import json_body, json_body_docs
from cookhub.schemas.common import ErrorResponse
from cookhub.schemas.recipe import RecipeCreate, RecipeResponse, ShoppingListResponse
from cookhub.services.recipe_service import recipe_service

router = APIRouter(prefix="/api", tags=["Recipes"])


@router.get(
    "/recipes",
    response_model=List[RecipeResponse],
    summary="List all recipes with their chef's name",
)
async def list_recipes(store: Store = Depends(get_store)) -> List[RecipeResponse]:
    return await recipe_service.list_recipes(store)


@router.post(
    "/recipes",
    response_model=RecipeResponse,
    responses={
        400: {"description": "Body is not valid JSON", "model": ErrorResponse},
        500: {"description": "Store failure", "model": ErrorResponse},
    },
    summary="Create a recipe",
    openapi_extra=json_body_docs(RecipeCreate),
    description=(
        "All fields are optional. Ingredients are stored in the given order "
        "and returned as a list."
    ),
)
async def create_recipe(
    payload: RecipeCreate = Depends(json_body(RecipeCreate)),
    store: Store = Depends(get_store),
) -> RecipeResponse:
    return await recipe_service.create_recipe(store, payload)


@router.get(
    "/search",
    response_model=List[RecipeResponse],
    responses={400: {"description": "Empty query", "model": ErrorResponse}},
    summary="Substring search over title, description and ingredients",
)
async def search_recipes(
    q: Optional[str] = Query(default=None, description="Text to look for"),
    store: Store = Depends(get_store),
) -> List[RecipeResponse]:
    return await recipe_service.search_recipes(store, q)


@router.get(
    "/shopping-list",
    response_model=ShoppingListResponse,
    responses={
        400: {"description": "recipe_id missing", "model": ErrorResponse},
        404: {"description": "Unknown recipe", "model": ErrorResponse},
    },
    summary="Ingredient list of one recipe",
)
async def shopping_list(
    recipe_id: Optional[str] = Query(default=None),
    store: Store = Depends(get_store),
) -> ShoppingListResponse:
    return await recipe_service.shopping_list(store, recipe_id)
