"""
CookHub Backend — Master Class Model
======================================

What:  ORM model for the `master_classes` table.

The scheduled time lives in a column literally named `datetime` and is stored
as text ("YYYY-MM-DD HH:MM" or "YYYY-MM-DD HH:MM:SS"). Ordering and the
"future classes" filter rely on lexicographic comparison of that text, which
matches chronological order for this format.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from cookhub.database import Base


class MasterClass(Base):
    __tablename__ = "master_classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    chef_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("chefs.id"))
    scheduled_at: Mapped[Optional[str]] = mapped_column("datetime", Text)
    duration: Mapped[Optional[int]] = mapped_column(Integer)  # minutes
    price: Mapped[Optional[int]] = mapped_column(Integer)
    max_students: Mapped[Optional[int]] = mapped_column(Integer)
    description: Mapped[Optional[str]] = mapped_column(Text)

    # Both the list view and recommendations order by scheduled time
    __table_args__ = (
        Index("idx_master_classes_datetime", scheduled_at),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<MasterClass(id={self.id}, title='{self.title}', "
            f"datetime='{self.scheduled_at}')>"
        )
