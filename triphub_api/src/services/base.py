from __future__ import annotations

from sqlalchemy.orm import Session


class BaseService:
    """
    Base class for services. Holds a session for use across multiple repositories.

    Services should keep business logic and orchestration, delegating data access
    to repositories through the entity access helpers.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
