"""
CookHub Backend — Chef, User & Master Class Schemas
=====================================================

What:  API contract for /api/chefs, /api/users and /api/masterclasses.

The master class start time is exposed as `datetime` on the wire (the column
name) and held as `scheduled_at` in Python.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Chefs
# ══════════════════════════════════════════════════════════════════════════


class ChefCreate(BaseModel):
    name: str = ""
    speciality: str = ""
    rating: float = 0.0
    avatar: str = ""
    description: str = ""


class ChefResponse(BaseModel):
    id: int
    name: str
    speciality: Optional[str] = None
    rating: Optional[float] = None
    avatar: Optional[str] = None
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ══════════════════════════════════════════════════════════════════════════
# Users
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """
    Body of POST /api/users.

    username and email are UNIQUE in the store; a duplicate fails the insert
    and is reported as a server error.
    """
    username: str = ""
    email: str = ""
    preferences: str = Field(
        default="",
        json_schema_extra={"example": "italian,european"},
    )


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    preferences: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# ══════════════════════════════════════════════════════════════════════════
# Master Classes
# ══════════════════════════════════════════════════════════════════════════


class MasterClassCreate(BaseModel):
    title: str = ""
    chef_id: int = 0
    scheduled_at: str = Field(
        default="",
        alias="datetime",
        json_schema_extra={"example": "2030-06-01 18:00"},
    )
    duration: int = 0
    price: int = 0
    max_students: int = 0
    description: str = ""

    model_config = ConfigDict(populate_by_name=True)


class MasterClassResponse(BaseModel):
    id: int
    title: str
    chef_id: Optional[int] = None
    chef_name: Optional[str] = None
    scheduled_at: Optional[str] = Field(default=None, alias="datetime")
    duration: Optional[int] = None
    price: Optional[int] = None
    max_students: Optional[int] = None
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)
