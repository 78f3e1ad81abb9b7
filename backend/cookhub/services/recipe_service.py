"""
CookHub Backend — Recipe Service
==================================

What:  Recipe listing, creation, substring search and shopping lists.
How:   Ingredients are stored as a JSON array in a TEXT column. Reads decode
       it per row; a row whose ingredients cannot be decoded is logged and
       skipped, and the rest of the list is still returned.

Query shapes:
    list:     recipes INNER JOIN chefs (recipes without a matching chef are omitted)
    search:   same join, WHERE title LIKE %q% OR description LIKE %q% OR ingredients LIKE %q%
    shopping: SELECT ingredients FROM recipes WHERE id = ?

LIKE is ASCII case-insensitive in SQLite; non-ASCII text (e.g. Cyrillic)
matches case-sensitively.
"""

import json
import logging
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError

from cookhub.database import Store
from cookhub.exceptions import DatabaseError, NotFoundError, ValidationError
from cookhub.models import Chef, Recipe
from cookhub.schemas.recipe import RecipeCreate, RecipeResponse, ShoppingListResponse
from cookhub.services.params import as_id, require_param

logger = logging.getLogger(__name__)


def encode_ingredients(ingredients: List[str]) -> str:
    """Serialize an ingredient list for storage. Non-ASCII text is kept as-is
    so substring search matches what the user typed."""
    return json.dumps(ingredients, ensure_ascii=False)


def decode_ingredients(raw: Optional[str]) -> List[str]:
    """
    Decode the stored ingredient text.

    NULL and JSON `null` decode to an empty list.

    Raises:
        ValueError: the text is not JSON, or not an array of strings.
    """
    if raw is None:
        return []
    value = json.loads(raw)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError("ingredients must be a JSON array of strings")
    return value


def collect_recipes(rows: Iterable[Tuple[Recipe, Optional[str]]]) -> List[RecipeResponse]:
    """
    Build responses from (Recipe, chef_name) rows.

    Policy: a row with malformed ingredients is skipped and logged; it never
    fails the whole response.
    """
    recipes: List[RecipeResponse] = []
    for recipe, chef_name in rows:
        try:
            ingredients = decode_ingredients(recipe.ingredients)
        except ValueError as e:
            logger.warning("Skipping recipe %s: malformed ingredients (%s)", recipe.id, e)
            continue
        recipes.append(
            RecipeResponse(
                id=recipe.id,
                title=recipe.title,
                description=recipe.description,
                ingredients=ingredients,
                chef_id=recipe.chef_id,
                chef_name=chef_name,
                video_url=recipe.video_url,
                created_at=recipe.created_at,
            )
        )
    return recipes


class RecipeService:
    """Business logic for /api/recipes, /api/search and /api/shopping-list."""

    def _recipes_with_chef(self):
        return (
            select(Recipe, Chef.name)
            .join(Chef, Recipe.chef_id == Chef.id)
            .order_by(Recipe.id)
        )

    async def list_recipes(self, store: Store) -> List[RecipeResponse]:
        try:
            async with store.session() as session:
                rows = (await session.execute(self._recipes_with_chef())).all()
        except SQLAlchemyError as e:
            logger.error("Error querying recipes: %s", e)
            raise DatabaseError(context={"operation": "list_recipes"})
        return collect_recipes(rows)

    async def create_recipe(self, store: Store, payload: RecipeCreate) -> RecipeResponse:
        """
        Insert a recipe and return it with its assigned id and timestamp.

        chef_name is resolved from the chefs table; it is null when chef_id
        does not reference an existing chef.
        """
        ingredients = list(payload.ingredients or [])
        try:
            async with store.session() as session:
                recipe = Recipe(
                    title=payload.title,
                    description=payload.description,
                    ingredients=encode_ingredients(ingredients),
                    chef_id=payload.chef_id,
                    video_url=payload.video_url,
                )
                session.add(recipe)
                await session.flush()
                await session.refresh(recipe)
                chef_name = await session.scalar(
                    select(Chef.name).where(Chef.id == recipe.chef_id)
                )
        except SQLAlchemyError as e:
            logger.error("Error creating recipe: %s", e)
            raise DatabaseError(context={"operation": "create_recipe"})

        logger.info("Recipe %d created: %s", recipe.id, recipe.title)
        return RecipeResponse(
            id=recipe.id,
            title=recipe.title,
            description=recipe.description,
            ingredients=ingredients,
            chef_id=recipe.chef_id,
            chef_name=chef_name,
            video_url=recipe.video_url,
            created_at=recipe.created_at,
        )

    async def search_recipes(self, store: Store, query: Optional[str]) -> List[RecipeResponse]:
        if not query:
            raise ValidationError(message="search query is required", field="q")

        pattern = f"%{query}%"
        stmt = self._recipes_with_chef().where(
            or_(
                Recipe.title.like(pattern),
                Recipe.description.like(pattern),
                Recipe.ingredients.like(pattern),
            )
        )
        try:
            async with store.session() as session:
                rows = (await session.execute(stmt)).all()
        except SQLAlchemyError as e:
            logger.error("Error searching recipes for %r: %s", query, e)
            raise DatabaseError(context={"operation": "search_recipes"})
        return collect_recipes(rows)

    async def shopping_list(self, store: Store, recipe_id: Optional[str]) -> ShoppingListResponse:
        """
        Return a recipe's ingredients verbatim as a shopping list.

        Raises:
            ValidationError: recipe_id missing (→ 400)
            NotFoundError:   no recipe with that id (→ 404)
        """
        recipe_id = require_param(recipe_id, "recipe_id")
        rid = as_id(recipe_id)
        if rid is None:
            raise NotFoundError(resource="recipe", resource_id=recipe_id)

        try:
            async with store.session() as session:
                row = (
                    await session.execute(select(Recipe.ingredients).where(Recipe.id == rid))
                ).first()
        except SQLAlchemyError as e:
            logger.error("Error loading ingredients for recipe %s: %s", recipe_id, e)
            raise DatabaseError(context={"recipe_id": recipe_id})

        if row is None:
            raise NotFoundError(resource="recipe", resource_id=recipe_id)

        try:
            ingredients = decode_ingredients(row[0])
        except ValueError as e:
            logger.warning("Recipe %s has malformed ingredients: %s", recipe_id, e)
            ingredients = []

        return ShoppingListResponse(recipe_id=recipe_id, shopping_list=ingredients)


# ── Singleton Instance ────────────────────────────────────────────────────
recipe_service = RecipeService()
