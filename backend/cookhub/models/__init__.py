"""
CookHub Backend — ORM Models
==============================

Importing this package registers all six tables on `Base.metadata`, which is
what the schema manager creates on startup.

Tables:
    chefs, users, recipes, master_classes, subscriptions, user_history
"""

from cookhub.models.activity import Subscription, UserHistory
from cookhub.models.chef import Chef
from cookhub.models.master_class import MasterClass
from cookhub.models.recipe import Recipe
from cookhub.models.user import User

__all__ = [
    "Chef",
    "MasterClass",
    "Recipe",
    "Subscription",
    "User",
    "UserHistory",
]
