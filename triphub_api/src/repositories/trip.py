from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.db.models.trip import Trip
from .base import SqlAlchemyRepository, Sort


class TripRepository(SqlAlchemyRepository[Trip]):
    """Repository for Trips."""

    model = Trip

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def find_by_destination(self, destination: str, sort: Optional[Sort] = None) -> List[Trip]:
        """Trips whose destination matches case-insensitively, by start date unless sorted."""
        stmt = select(Trip).where(Trip.destination.ilike(destination))
        if sort is not None and sort.is_sorted:
            stmt = stmt.order_by(*self._order_by(sort))
        else:
            stmt = stmt.order_by(Trip.start_date.asc(), Trip.id.asc())
        return list(self.scalars(stmt))
