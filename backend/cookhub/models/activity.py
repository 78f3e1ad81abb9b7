"""
CookHub Backend — Subscription & Enrollment Models
====================================================

What:  ORM models for the two user-activity tables.

    subscriptions  (user_id, chef_id)          UNIQUE per pair, "follow" relation
    user_history   (user_id, master_class_id)  UNIQUE per pair, enrollment ledger

Both are written with INSERT OR IGNORE, so repeating a subscribe or enroll
request is a no-op rather than an error. `user_history` doubles as the
capacity ledger: the number of rows for a master class is its enrolled count.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from cookhub.database import Base


class Subscription(Base):
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("user_id", "chef_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("users.id"))
    chef_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("chefs.id"))

    def __repr__(self) -> str:
        return f"<Subscription(user_id={self.user_id}, chef_id={self.chef_id})>"


class UserHistory(Base):
    __tablename__ = "user_history"
    __table_args__ = (
        UniqueConstraint("user_id", "master_class_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("users.id"))
    master_class_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("master_classes.id")
    )
    attended_at: Mapped[Optional[str]] = mapped_column(
        Text,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<UserHistory(user_id={self.user_id}, "
            f"master_class_id={self.master_class_id})>"
        )
