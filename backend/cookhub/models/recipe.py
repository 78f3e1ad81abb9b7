"""
CookHub Backend — Recipe Model
================================

What:  ORM model for the `recipes` table.

Storage format:
    ingredients: JSON array of strings stored as TEXT, e.g. '["beef", "mushrooms"]'.
                 Order is preserved. Search matches against this raw text.
    created_at:  Assigned by SQLite (CURRENT_TIMESTAMP, UTC, "YYYY-MM-DD HH:MM:SS").
                 Kept as text so rows written by other tools never fail to load.

Integrity:
    chef_id declares a foreign key to chefs.id. SQLite only enforces it when
    ENFORCE_FOREIGN_KEYS is enabled; otherwise a recipe may reference a missing
    chef and is then absent from the (inner-joined) recipe list.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from cookhub.database import Base


class Recipe(Base):
    __tablename__ = "recipes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    ingredients: Mapped[Optional[str]] = mapped_column(Text)
    chef_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("chefs.id"))
    video_url: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[Optional[str]] = mapped_column(
        Text,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, title='{self.title}', chef_id={self.chef_id})>"
