"""
Generic entity access helpers.

Every helper delegates to a Repository, inspects the result, and either returns
it or raises an EntityError subclass naming the entity kind. Nothing is cached
or retried; repository errors propagate unchanged.

Example:
    trip = save_entity(repo, Trip(name="Lisbon"), "Trip")
    trips = get_all_entities(repo, Sort.by("id"), "Trip")
    delete_entity(repo, trip.id, "Trip")
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, TypeVar

from src.core.exceptions import EntityCreationError, EntityNotFoundError
from src.repositories.base import Repository, Sort

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NO_ID = object()


def _persist(repository: Repository[T], entity: T, entity_name: str) -> T:
    saved = repository.save(entity)
    # entities without an id attribute are not identifiable and skip the check
    if getattr(saved, "id", _NO_ID) is None:
        logger.warning("Save of %s returned no identifier", entity_name)
        raise EntityCreationError(f"Failed to create the {entity_name}", entity_name)
    return saved


# PUBLIC_INTERFACE
def save_entity(repository: Repository[T], entity: T, entity_name: str) -> T:
    """
    Save an entity and verify the storage layer assigned it an identifier.

    Entities that do not expose an ``id`` skip the verification.

    Returns:
        The saved entity as returned by the repository.
    Raises:
        EntityCreationError: the saved entity still has no id.
    """
    logger.debug("Saving %s", entity_name)
    return _persist(repository, entity, entity_name)


# PUBLIC_INTERFACE
def save_entity_without_return(repository: Repository[T], entity: T, entity_name: str) -> None:
    """Same as save_entity but discards the saved entity."""
    logger.debug("Saving %s (no return)", entity_name)
    _persist(repository, entity, entity_name)


# PUBLIC_INTERFACE
def get_all_entities(repository: Repository[T], sort: Optional[Sort], entity_name: str) -> List[T]:
    """
    Fetch all entities in the given order.

    An empty result is reported as EntityNotFoundError rather than an empty list.
    """
    entities = repository.find_all(sort)
    if not entities:
        logger.warning("No %s entities found", entity_name)
        raise EntityNotFoundError(f"No {entity_name} entities found.", entity_name)
    logger.debug("Fetched %d %s entities", len(entities), entity_name)
    return entities


# PUBLIC_INTERFACE
def delete_entity(repository: Repository[T], entity_id: int, entity_name: str) -> None:
    """
    Delete an entity by id after checking that it exists.

    The existence check and the delete are separate repository calls.
    """
    if not repository.exists_by_id(entity_id):
        logger.warning("%s id=%s not found for delete", entity_name, entity_id)
        raise EntityNotFoundError(f"{entity_name} not found", entity_name)
    repository.delete_by_id(entity_id)
    logger.debug("Deleted %s id=%s", entity_name, entity_id)


# PUBLIC_INTERFACE
def get_entity_by_id(repository: Repository[T], entity_id: Optional[int], entity_name: str) -> T:
    """
    Fetch an entity by id.

    Ids that are None or not positive are rejected without a repository lookup.
    """
    entity = repository.find_by_id(entity_id) if entity_id is not None and entity_id > 0 else None
    if entity is None:
        logger.warning("%s id=%s not found", entity_name, entity_id)
        raise EntityNotFoundError(f"{entity_name} not found with ID: {entity_id}", entity_name)
    return entity


class EntityAccessor(Generic[T]):
    """The helpers above bound to one repository and entity name."""

    def __init__(self, repository: Repository[T], entity_name: str) -> None:
        self.repository = repository
        self.entity_name = entity_name

    def save(self, entity: T) -> T:
        return save_entity(self.repository, entity, self.entity_name)

    def save_without_return(self, entity: T) -> None:
        save_entity_without_return(self.repository, entity, self.entity_name)

    def get_all(self, sort: Optional[Sort] = None) -> List[T]:
        return get_all_entities(self.repository, sort, self.entity_name)

    def get_by_id(self, entity_id: Optional[int]) -> T:
        return get_entity_by_id(self.repository, entity_id, self.entity_name)

    def delete(self, entity_id: int) -> None:
        delete_entity(self.repository, entity_id, self.entity_name)
