from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from src.core.exceptions import EntityNotFoundError
from src.db.models.trip import Trip
from src.repositories.base import Sort
from src.repositories.trip import TripRepository
from src.schemas.trip import TripCreate, TripUpdate
from src.services.base import BaseService
from src.services.entity_access import EntityAccessor

logger = logging.getLogger(__name__)

ENTITY_NAME = "Trip"
DEFAULT_SORT = Sort.by("id")


class TripService(BaseService):
    """Domain service for trips."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.repo = TripRepository(session)
        self.trips = EntityAccessor(self.repo, ENTITY_NAME)

    # PUBLIC_INTERFACE
    def create_trip(self, payload: TripCreate) -> Trip:
        """
        Persist a new trip.

        Raises:
            EntityCreationError: the database did not assign an id.
        """
        created = self.trips.save(Trip(**payload.model_dump()))
        logger.info("Created trip id=%s", created.id)
        return created

    # PUBLIC_INTERFACE
    def list_trips(self, sort: Optional[Sort] = None, destination: Optional[str] = None) -> List[Trip]:
        """
        Return all trips, ordered by id unless a sort is given.

        With a destination, only trips going there are returned (ordered by
        start date unless sorted); none matching is reported as not found.
        """
        if destination:
            trips = self.repo.find_by_destination(destination, sort)
            if not trips:
                raise EntityNotFoundError(f"No {ENTITY_NAME} entities found for destination: {destination}", ENTITY_NAME)
            return trips
        if sort is None or not sort.is_sorted:
            sort = DEFAULT_SORT
        return self.trips.get_all(sort)

    # PUBLIC_INTERFACE
    def get_trip(self, trip_id: int) -> Trip:
        return self.trips.get_by_id(trip_id)

    # PUBLIC_INTERFACE
    def update_trip(self, trip_id: int, payload: TripUpdate) -> Trip:
        """
        Apply the fields present in payload to an existing trip.

        Raises:
            EntityNotFoundError: no trip with this id.
            ValueError: the resulting end_date is before start_date.
        """
        trip = self.trips.get_by_id(trip_id)
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(trip, field, value)
        if trip.start_date and trip.end_date and trip.end_date < trip.start_date:
            self.session.rollback()
            raise ValueError("end_date must not be before start_date")
        return self.trips.save(trip)

    # PUBLIC_INTERFACE
    def delete_trip(self, trip_id: int) -> None:
        self.trips.delete(trip_id)
        logger.info("Deleted trip id=%s", trip_id)
