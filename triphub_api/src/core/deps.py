from __future__ import annotations

from typing import Generator, List, Optional

from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.db.session import get_session
from src.repositories.base import Sort
from src.services.trip import TripService


# PUBLIC_INTERFACE
def get_db_session() -> Generator[Session, None, None]:
    """Yield a request-scoped Session."""
    yield from get_session()


# PUBLIC_INTERFACE
def get_trip_service(session: Session = Depends(get_db_session)) -> TripService:
    """Build a TripService bound to the request session."""
    return TripService(session)


# PUBLIC_INTERFACE
def get_sort(
    sort: Optional[List[str]] = Query(
        None,
        description="Sort terms as 'field' or 'field,asc|desc'. Repeat for multiple fields.",
    ),
) -> Sort:
    """
    Parse the 'sort' query parameter into a Sort.

    Raises:
        HTTPException: 400 Bad Request on a malformed term.
    """
    try:
        return Sort.parse(sort)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
