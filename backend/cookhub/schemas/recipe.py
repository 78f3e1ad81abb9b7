"""
CookHub Backend — Recipe Schemas
==================================

What:  API contract for /api/recipes, /api/search and /api/shopping-list.
How:   `ingredients` travels as a JSON array of strings; the service layer
       converts it to and from the TEXT column.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class RecipeCreate(BaseModel):
    """
    Body of POST /api/recipes.

    Any of `id`, `chef_name` or `created_at` sent by the client are ignored:
    id and timestamp are assigned by the store, chef_name comes from the join.
    `"ingredients": null` is accepted and stored as an empty list.
    """
    title: str = Field(default="", json_schema_extra={"example": "Beef Wellington"})
    description: str = Field(default="")
    ingredients: Optional[List[str]] = Field(
        default_factory=list,
        json_schema_extra={"example": ["beef", "puff pastry", "mushrooms"]},
    )
    chef_id: int = Field(default=0)
    video_url: str = Field(default="")


class RecipeResponse(BaseModel):
    """A recipe row with the chef's name denormalized from the join."""
    id: int
    title: str
    description: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    chef_id: Optional[int] = None
    chef_name: Optional[str] = None
    video_url: Optional[str] = None
    created_at: Optional[str] = None


class ShoppingListResponse(BaseModel):
    """
    Returned by GET /api/shopping-list.

    recipe_id echoes the query parameter exactly as sent.
    shopping_list is the stored ingredient list, unmodified.
    """
    recipe_id: str
    shopping_list: List[str]
