"""
CookHub Backend — Subscription, Enrollment & Stats Schemas
============================================================
"""

from typing import Optional

from pydantic import BaseModel


class SubscriptionRequest(BaseModel):
    """Body of POST /api/subscribe."""
    user_id: int = 0
    chef_id: int = 0


class EnrollmentRequest(BaseModel):
    """Body of POST /api/enroll."""
    user_id: int = 0
    master_class_id: int = 0


class HistoryEntry(BaseModel):
    """One enrollment with the class title and chef name joined in."""
    id: int
    user_id: Optional[int] = None
    master_class_id: Optional[int] = None
    class_title: Optional[str] = None
    chef_name: Optional[str] = None
    attended_at: Optional[str] = None


class UserSubscriptionResponse(BaseModel):
    id: int
    user_id: Optional[int] = None
    chef_id: Optional[int] = None
    chef_name: Optional[str] = None
    speciality: Optional[str] = None
    chef_rating: Optional[float] = None


class StatsResponse(BaseModel):
    """Row counts; a count that could not be read is reported as 0."""
    total_recipes: int = 0
    total_chefs: int = 0
    total_users: int = 0
    total_master_classes: int = 0
    total_enrollments: int = 0
