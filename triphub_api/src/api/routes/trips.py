from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from src.core.deps import get_sort, get_trip_service
from src.repositories.base import Sort
from src.schemas.trip import TripCreate, TripRead, TripUpdate
from src.services.trip import TripService

router = APIRouter(prefix="/trips", tags=["Trips"])


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TripRead],
    summary="List trips",
    description="List all trips, optionally only those to one destination. Responds 404 when none match.",
)
def list_trips(
    sort: Sort = Depends(get_sort),
    destination: str | None = Query(None, description="Case-insensitive destination filter"),
    service: TripService = Depends(get_trip_service),
) -> List[TripRead]:
    try:
        trips = service.list_trips(sort, destination=destination)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return [TripRead.model_validate(t) for t in trips]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TripRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create trip",
)
def create_trip(
    payload: TripCreate,
    service: TripService = Depends(get_trip_service),
) -> TripRead:
    return TripRead.model_validate(service.create_trip(payload))


# PUBLIC_INTERFACE
@router.get("/{trip_id}", response_model=TripRead, summary="Get trip")
def get_trip(
    trip_id: int = Path(..., description="Trip ID"),
    service: TripService = Depends(get_trip_service),
) -> TripRead:
    return TripRead.model_validate(service.get_trip(trip_id))


# PUBLIC_INTERFACE
@router.patch("/{trip_id}", response_model=TripRead, summary="Update trip")
def update_trip(
    payload: TripUpdate,
    trip_id: int = Path(..., description="Trip ID"),
    service: TripService = Depends(get_trip_service),
) -> TripRead:
    try:
        updated = service.update_trip(trip_id, payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    return TripRead.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{trip_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete trip",
)
def delete_trip(
    trip_id: int = Path(..., description="Trip ID"),
    service: TripService = Depends(get_trip_service),
) -> Response:
    service.delete_trip(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
