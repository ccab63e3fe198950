from dataclasses import dataclass
from typing import Dict, List, Optional

import pytest

from src.core.exceptions import EntityCreationError, EntityNotFoundError
from src.repositories.base import Direction, Sort
from src.services.entity_access import (
    EntityAccessor,
    delete_entity,
    get_all_entities,
    get_entity_by_id,
    save_entity,
    save_entity_without_return,
)


@dataclass
class Thing:
    name: str
    id: Optional[int] = None


@dataclass
class Note:
    """Has no id attribute, so save verification is skipped."""
    text: str


class RecordingRepository:
    """In-memory repository that records every call made to it."""

    def __init__(self, assign_ids: bool = True) -> None:
        self.assign_ids = assign_ids
        self.rows: Dict[int, Thing] = {}
        self.calls: List[tuple] = []
        self._next_id = 1

    def save(self, entity):
        self.calls.append(("save", entity))
        if self.assign_ids and getattr(entity, "id", 0) is None:
            entity.id = self._next_id
            self._next_id += 1
        if getattr(entity, "id", None) is not None:
            self.rows[entity.id] = entity
        return entity

    def find_by_id(self, entity_id):
        self.calls.append(("find_by_id", entity_id))
        return self.rows.get(entity_id)

    def find_all(self, sort=None):
        self.calls.append(("find_all", sort))
        rows = list(self.rows.values())
        for order in reversed(sort.orders if sort else ()):
            rows.sort(key=lambda r: getattr(r, order.property), reverse=order.direction is Direction.DESC)
        return rows

    def exists_by_id(self, entity_id):
        self.calls.append(("exists_by_id", entity_id))
        return entity_id in self.rows

    def delete_by_id(self, entity_id):
        self.calls.append(("delete_by_id", entity_id))
        self.rows.pop(entity_id, None)

    def call_names(self):
        return [c[0] for c in self.calls]


@pytest.fixture()
def repo():
    return RecordingRepository()


@pytest.fixture()
def populated(repo):
    save_entity(repo, Thing("A"), "Thing")
    save_entity(repo, Thing("B"), "Thing")
    repo.calls.clear()
    return repo


def test_save_entity_returns_entity_with_assigned_id(repo):
    saved = save_entity(repo, Thing("A"), "Thing")
    assert saved.id == 1
    assert repo.call_names() == ["save"]


def test_save_entity_raises_when_id_not_assigned():
    repo = RecordingRepository(assign_ids=False)
    with pytest.raises(EntityCreationError) as exc:
        save_entity(repo, Thing("A"), "Thing")
    assert str(exc.value) == "Failed to create the Thing"
    assert exc.value.entity_name == "Thing"


def test_save_without_return_still_verifies_id():
    repo = RecordingRepository(assign_ids=False)
    with pytest.raises(EntityCreationError):
        save_entity_without_return(repo, Thing("A"), "Thing")


def test_save_without_return_returns_none(repo):
    assert save_entity_without_return(repo, Thing("A"), "Thing") is None
    assert repo.rows[1].name == "A"


def test_save_skips_verification_for_entities_without_id():
    repo = RecordingRepository(assign_ids=False)
    note = Note("hello")
    assert save_entity(repo, note, "Note") is note


@pytest.mark.parametrize("entity_id", [0, -1, -99])
def test_get_by_non_positive_id_does_not_hit_repository(populated, entity_id):
    with pytest.raises(EntityNotFoundError) as exc:
        get_entity_by_id(populated, entity_id, "Thing")
    assert str(exc.value) == f"Thing not found with ID: {entity_id}"
    assert populated.calls == []


def test_get_by_none_id_is_not_found(populated):
    with pytest.raises(EntityNotFoundError):
        get_entity_by_id(populated, None, "Thing")
    assert populated.calls == []


def test_get_by_missing_id_names_entity_and_id(populated):
    with pytest.raises(EntityNotFoundError) as exc:
        get_entity_by_id(populated, 99, "Thing")
    assert "Thing" in str(exc.value)
    assert "99" in str(exc.value)
    assert populated.call_names() == ["find_by_id"]


def test_get_all_on_empty_repository_raises(repo):
    with pytest.raises(EntityNotFoundError) as exc:
        get_all_entities(repo, Sort.by("id"), "Thing")
    assert str(exc.value) == "No Thing entities found."


def test_get_all_returns_repository_result_unmodified(populated):
    sort = Sort.by("name", direction=Direction.DESC)
    result = get_all_entities(populated, sort, "Thing")
    assert [t.name for t in result] == ["B", "A"]
    assert populated.calls == [("find_all", sort)]


def test_delete_missing_never_calls_delete(populated):
    with pytest.raises(EntityNotFoundError) as exc:
        delete_entity(populated, 42, "Thing")
    assert str(exc.value) == "Thing not found"
    assert "delete_by_id" not in populated.call_names()


def test_delete_existing_calls_delete_once(populated):
    delete_entity(populated, 1, "Thing")
    assert populated.call_names() == ["exists_by_id", "delete_by_id"]


def test_storage_errors_propagate_unchanged(repo):
    def boom(entity_id):
        raise RuntimeError("connection lost")

    repo.find_by_id = boom
    with pytest.raises(RuntimeError, match="connection lost"):
        get_entity_by_id(repo, 1, "Thing")


def test_scenario(populated):
    things = EntityAccessor(populated, "Thing")

    assert [t.name for t in things.get_all(Sort.by("id"))] == ["A", "B"]
    assert things.get_by_id(2).name == "B"

    with pytest.raises(EntityNotFoundError, match="^Thing not found with ID: 99$"):
        things.get_by_id(99)

    things.delete(1)
    assert populated.exists_by_id(1) is False

    with pytest.raises(EntityNotFoundError, match="^Thing not found$"):
        things.delete(1)


class Ticket:
    """Exposes its id through a property rather than a field."""

    def __init__(self, code, assigned_id=None):
        self.code = code
        self._id = assigned_id

    @property
    def id(self):
        return self._id


class EchoRepository:
    def save(self, entity):
        return entity


def test_save_checks_id_exposed_by_property():
    repo = EchoRepository()
    with pytest.raises(EntityCreationError, match="^Failed to create the Ticket$"):
        save_entity(repo, Ticket("T-1"), "Ticket")
    assert save_entity(repo, Ticket("T-2", assigned_id=7), "Ticket").id == 7
