"""
CookHub Backend — Chef Model
==============================

What:  ORM model for the `chefs` table.
Who:   Referenced by recipes and master classes through `chef_id`; joined into
       their list views to denormalize the chef's name.
"""

from typing import Optional

from sqlalchemy import Float, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from cookhub.database import Base


class Chef(Base):
    """A chef whose recipes and master classes are published on the platform."""

    __tablename__ = "chefs"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    speciality: Mapped[Optional[str]] = mapped_column(Text)

    # 0.0–5.0 by convention; not constrained by the schema
    rating: Mapped[Optional[float]] = mapped_column(Float, default=0.0, server_default=text("0"))
    avatar: Mapped[Optional[str]] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<Chef(id={self.id}, name='{self.name}')>"
