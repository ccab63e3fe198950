from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Optional, Protocol, Tuple, Type, TypeVar

from sqlalchemy import Executable, delete, exists, inspect, select
from sqlalchemy.orm import Session

T = TypeVar("T")
ModelT = TypeVar("ModelT")


class Direction(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Order:
    """A single ordering term."""
    property: str
    direction: Direction = Direction.ASC


@dataclass(frozen=True)
class Sort:
    """
    Ordering passed to Repository.find_all.

    Examples:
        Sort.by("id")
        Sort.by("start_date", "name", direction=Direction.DESC)
        Sort.by("destination").and_(Sort.by("id"))
    """
    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> "Sort":
        return cls(tuple(Order(p, direction) for p in properties))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    def and_(self, other: "Sort") -> "Sort":
        return Sort(self.orders + other.orders)

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    # PUBLIC_INTERFACE
    @classmethod
    def parse(cls, values: Optional[Iterable[str]]) -> "Sort":
        """
        Build a Sort from query-string terms such as "name" or "start_date,desc".

        Raises:
            ValueError: on an empty property or an unknown direction.
        """
        orders: List[Order] = []
        for raw in values or ():
            prop, _, direction = raw.partition(",")
            prop = prop.strip()
            if not prop:
                raise ValueError(f"Invalid sort term: {raw!r}")
            try:
                orders.append(Order(prop, Direction((direction.strip() or "asc").lower())))
            except ValueError:
                raise ValueError(f"Invalid sort direction in {raw!r}; use 'asc' or 'desc'") from None
        return cls(tuple(orders))


class Repository(Protocol[T]):
    """
    Storage capability consumed by the entity access helpers.

    Implementations raise their own storage errors; callers let them propagate.
    """

    def save(self, entity: T) -> T: ...

    def find_by_id(self, entity_id: int) -> Optional[T]: ...

    def find_all(self, sort: Optional[Sort] = None) -> List[T]: ...

    def exists_by_id(self, entity_id: int) -> bool: ...

    def delete_by_id(self, entity_id: int) -> None: ...


class BaseRepository:
    """
    Base class for repositories providing common session helpers.

    Note:
      Transactions are committed per write call. Callers needing several writes
      in one transaction should use the session directly.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def execute(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute a SQLAlchemy statement."""
        return self.session.execute(statement, params or {})

    def scalars(self, statement: Executable, params: Optional[dict[str, Any]] = None):
        """Execute and return scalars."""
        result = self.execute(statement, params)
        return result.scalars()

    def commit(self) -> None:
        """Commit current transaction."""
        self.session.commit()

    def add(self, entity: Any) -> None:
        """Add a single entity to session."""
        self.session.add(entity)


class SqlAlchemyRepository(BaseRepository, Generic[ModelT]):
    """
    Repository implementation for a single mapped model class with an
    integer primary key.
    """

    model: Type[ModelT]

    def __init__(self, session: Session, model: Optional[Type[ModelT]] = None) -> None:
        super().__init__(session)
        if model is not None:
            self.model = model
        if getattr(self, "model", None) is None:
            raise TypeError(f"{type(self).__name__} requires a model class")

    @property
    def _pk(self):
        return inspect(self.model).primary_key[0]

    def _order_by(self, sort: Sort) -> list:
        columns = inspect(self.model).columns
        clauses = []
        for order in sort.orders:
            if order.property not in columns:
                raise ValueError(f"Unknown sort property {order.property!r} for {self.model.__name__}")
            col = columns[order.property]
            clauses.append(col.desc() if order.direction is Direction.DESC else col.asc())
        return clauses

    def save(self, entity: ModelT) -> ModelT:
        if inspect(entity).detached:
            entity = self.session.merge(entity)
        else:
            self.add(entity)
        self.commit()
        self.session.refresh(entity)
        return entity

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        return self.session.get(self.model, entity_id)

    def find_all(self, sort: Optional[Sort] = None) -> List[ModelT]:
        stmt = select(self.model)
        if sort is not None and sort.is_sorted:
            stmt = stmt.order_by(*self._order_by(sort))
        return list(self.scalars(stmt))

    def exists_by_id(self, entity_id: int) -> bool:
        stmt = select(exists().where(self._pk == entity_id))
        return bool(self.session.scalar(stmt))

    def delete_by_id(self, entity_id: int) -> None:
        self.execute(delete(self.model).where(self._pk == entity_id))
        self.commit()
