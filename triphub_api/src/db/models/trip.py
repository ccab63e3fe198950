from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, IntPkMixin, TimestampMixin


class Trip(IntPkMixin, TimestampMixin, Base):
    """A planned trip."""
    __tablename__ = "trips"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    destination: Mapped[Optional[str]] = mapped_column(String(200), nullable=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"Trip(id={self.id!r}, name={self.name!r})"
