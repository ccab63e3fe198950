from datetime import date

import pytest
from sqlalchemy.orm import Session

from src.db.models import Trip
from src.repositories.base import Direction, Sort
from src.repositories.trip import TripRepository


@pytest.fixture()
def repo(session):
    return TripRepository(session)


def _trip(name, destination=None, start=None):
    return Trip(name=name, destination=destination, start_date=start)


def test_save_assigns_id_and_server_timestamps(repo):
    trip = repo.save(_trip("Lisbon"))
    assert trip.id is not None
    assert trip.created_at is not None
    assert trip.updated_at is not None


def test_save_merges_detached_instance(engine, repo):
    trip = repo.save(_trip("Lisbon"))
    repo.session.expunge(trip)
    trip.name = "Porto"

    merged = repo.save(trip)
    assert merged.id == trip.id

    with Session(engine) as other:
        assert other.get(Trip, trip.id).name == "Porto"


def test_find_by_id(repo):
    trip = repo.save(_trip("Lisbon"))
    assert repo.find_by_id(trip.id).name == "Lisbon"
    assert repo.find_by_id(trip.id + 100) is None


def test_find_all_orders(repo):
    repo.save(_trip("b", "Kyoto", date(2025, 3, 1)))
    repo.save(_trip("a", "Lisbon", date(2025, 1, 1)))
    repo.save(_trip("c", "Kyoto", date(2025, 2, 1)))

    assert [t.name for t in repo.find_all(Sort.by("id"))] == ["b", "a", "c"]
    assert [t.name for t in repo.find_all(Sort.by("name", direction=Direction.DESC))] == ["c", "b", "a"]

    by_dest_then_date = Sort.by("destination").and_(Sort.by("start_date"))
    assert [t.name for t in repo.find_all(by_dest_then_date)] == ["c", "b", "a"]


def test_find_all_empty(repo):
    assert repo.find_all(Sort.unsorted()) == []


def test_find_all_rejects_unknown_property(repo):
    with pytest.raises(ValueError, match="Unknown sort property"):
        repo.find_all(Sort.by("nope"))


def test_exists_and_delete_by_id(repo):
    trip = repo.save(_trip("Lisbon"))
    assert repo.exists_by_id(trip.id) is True

    repo.delete_by_id(trip.id)
    assert repo.exists_by_id(trip.id) is False
    assert repo.find_by_id(trip.id) is None


def test_delete_missing_id_is_silent(repo):
    repo.delete_by_id(12345)


def test_find_by_destination_is_case_insensitive(repo):
    repo.save(_trip("late", "Kyoto", date(2025, 11, 1)))
    repo.save(_trip("early", "kyoto", date(2025, 4, 1)))
    repo.save(_trip("other", "Lisbon"))

    assert [t.name for t in repo.find_by_destination("KYOTO")] == ["early", "late"]


def test_find_by_destination_with_sort(repo):
    repo.save(_trip("a", "Kyoto", date(2025, 11, 1)))
    repo.save(_trip("b", "Kyoto", date(2025, 4, 1)))

    by_name_desc = Sort.by("name", direction=Direction.DESC)
    assert [t.name for t in repo.find_by_destination("kyoto", by_name_desc)] == ["b", "a"]
