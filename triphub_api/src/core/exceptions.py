from __future__ import annotations

from typing import Optional


class EntityError(Exception):
    """
    Base class for client-visible entity access errors.

    The API layer maps subclasses to HTTP responses; see src.api.main.
    """

    def __init__(self, message: str, entity_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name


class EntityNotFoundError(EntityError):
    """Raised when an entity (by id, or as a whole collection) does not exist."""


class EntityCreationError(EntityError):
    """Raised when a save completes without the storage layer assigning an id."""
