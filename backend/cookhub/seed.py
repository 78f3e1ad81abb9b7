"""
CookHub Backend — Seed Loader
===============================

What:  Inserts the demo dataset (3 chefs, 4 recipes, 3 master classes, 2 users)
       into an empty database.
When:  After table creation on startup, only when the chefs table has no rows.

Every row is inserted in its own transaction. A failed insert is logged and
skipped, so a partially seeded database is possible and tolerated.
Recipes and master classes reference chefs by id 1..3, which holds for a
freshly created file.
"""

import json
import logging
from typing import Any, Dict, List, Type

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from cookhub.database import Base, Store
from cookhub.models import Chef, MasterClass, Recipe, User

logger = logging.getLogger(__name__)


SEED_CHEFS: List[Dict[str, Any]] = [
    {
        "name": "Гордон Рамзи",
        "speciality": "Европейская кухня",
        "rating": 4.9,
        "avatar": "https://via.placeholder.com/150",
        "description": "Мишленовский шеф-повар с мировым именем",
    },
    {
        "name": "Юлия Высоцкая",
        "speciality": "Русская кухня",
        "rating": 4.7,
        "avatar": "https://via.placeholder.com/150",
        "description": "Популярный телеведущий и кулинар",
    },
    {
        "name": "Джейми Оливер",
        "speciality": "Итальянская кухня",
        "rating": 4.8,
        "avatar": "https://via.placeholder.com/150",
        "description": "Британский повар, ресторатор и автор кулинарных книг",
    },
]

SEED_RECIPES: List[Dict[str, Any]] = [
    {
        "title": "Говядина Веллингтон",
        "description": "Классическое английское блюдо",
        "ingredients": ["говядина", "тесто слоеное", "грибы", "паштет"],
        "chef_id": 1,
        "video_url": "https://www.youtube.com/watch?v=example1",
    },
    {
        "title": "Борщ украинский",
        "description": "Традиционный славянский суп",
        "ingredients": ["свекла", "капуста", "морковь", "лук", "мясо"],
        "chef_id": 2,
        "video_url": "https://www.youtube.com/watch?v=example2",
    },
    {
        "title": "Паста Карбонара",
        "description": "Римская паста с беконом и яйцами",
        "ingredients": ["спагетти", "бекон", "яйца", "пармезан", "черный перец"],
        "chef_id": 3,
        "video_url": "https://www.youtube.com/watch?v=example3",
    },
    {
        "title": "Ризотто с грибами",
        "description": "Кремовое итальянское ризотто",
        "ingredients": ["рис арборио", "грибы", "лук", "вино белое", "пармезан"],
        "chef_id": 3,
        "video_url": "https://www.youtube.com/watch?v=example4",
    },
]

SEED_MASTER_CLASSES: List[Dict[str, Any]] = [
    {
        "title": "Секреты идеального стейка",
        "chef_id": 1,
        "scheduled_at": "2024-06-01 18:00",
        "duration": 120,
        "price": 5000,
        "max_students": 15,
        "description": "Научитесь готовить стейк как настоящий профессионал",
    },
    {
        "title": "Домашняя выпечка",
        "chef_id": 2,
        "scheduled_at": "2024-06-02 16:00",
        "duration": 180,
        "price": 3500,
        "max_students": 20,
        "description": "Традиционные рецепты русской выпечки",
    },
    {
        "title": "Итальянская паста",
        "chef_id": 3,
        "scheduled_at": "2024-06-03 19:00",
        "duration": 90,
        "price": 4000,
        "max_students": 12,
        "description": "Готовим пасту с нуля до подачи",
    },
]

SEED_USERS: List[Dict[str, Any]] = [
    {"username": "foodlover", "email": "food@example.com", "preferences": "итальянская,европейская"},
    {"username": "homecook", "email": "home@example.com", "preferences": "русская,домашняя"},
]


async def _insert_each(
    store: Store,
    model: Type[Base],
    rows: List[Dict[str, Any]],
    label: str,
) -> int:
    inserted = 0
    for row in rows:
        name = row.get("name") or row.get("title") or row.get("username")
        try:
            async with store.session() as session:
                session.add(model(**row))
        except SQLAlchemyError as e:
            logger.error("Error inserting %s %r: %s", label, name, e)
            continue
        inserted += 1
    return inserted


async def seed_database(store: Store) -> bool:
    """
    Populate an empty database with the demo dataset.

    Returns:
        True if seeding ran, False if it was skipped (data present, or the
        chef count could not be read).
    """
    try:
        async with store.session() as session:
            count = (await session.execute(select(func.count(Chef.id)))).scalar() or 0
    except SQLAlchemyError as e:
        logger.error("Error checking existing data: %s", e)
        return False

    if count > 0:
        logger.info("Data already exists, skipping seed")
        return False

    logger.info("Seeding database...")

    recipes = [
        {**recipe, "ingredients": json.dumps(recipe["ingredients"], ensure_ascii=False)}
        for recipe in SEED_RECIPES
    ]

    batches = [
        (Chef, SEED_CHEFS, "chefs"),
        (Recipe, recipes, "recipes"),
        (MasterClass, SEED_MASTER_CLASSES, "master classes"),
        (User, SEED_USERS, "users"),
    ]
    for model, rows, label in batches:
        inserted = await _insert_each(store, model, rows, label)
        logger.info("Seeded %d/%d %s", inserted, len(rows), label)

    logger.info("Database seeded successfully")
    return True
