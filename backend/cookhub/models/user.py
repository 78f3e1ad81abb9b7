"""
CookHub Backend — User Model
==============================

What:  ORM model for the `users` table.

`preferences` is a free-text, comma-joined tag string (e.g. "italian,european").
The recommendation engine matches the whole string as a substring of a chef's
speciality; it is never split.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from cookhub.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    preferences: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
