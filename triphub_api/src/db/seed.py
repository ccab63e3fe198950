"""
Database seeding utilities for sample data.

Seeds two example trips when the trips table is empty.

Usage:
  python -m src.db.seed
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.db.models import Trip
from src.db.session import create_schema, get_session
from src.repositories.trip import TripRepository
from src.services.entity_access import save_entity_without_return

logger = logging.getLogger(__name__)

SAMPLE_TRIPS = [
    {
        "name": "Lisbon long weekend",
        "destination": "Lisbon",
        "start_date": date(2025, 5, 2),
        "end_date": date(2025, 5, 5),
    },
    {
        "name": "Kyoto in autumn",
        "destination": "Kyoto",
        "start_date": date(2025, 11, 10),
        "end_date": date(2025, 11, 20),
    },
]


# PUBLIC_INTERFACE
def seed_all() -> None:
    """Seed the database with sample trips if none exist."""
    for session in get_session():
        _seed_trips(session)


def _seed_trips(session: Session) -> int:
    count = session.scalar(select(func.count(Trip.id))) or 0
    if count:
        logger.info("Trips already present (%d); skipping seed", count)
        return 0
    repo = TripRepository(session)
    for values in SAMPLE_TRIPS:
        save_entity_without_return(repo, Trip(**values), "Trip")
    logger.info("Seeded %d trips", len(SAMPLE_TRIPS))
    return len(SAMPLE_TRIPS)


if __name__ == "__main__":
    from src.core.logging import configure_logging

    configure_logging()
    create_schema()
    seed_all()
