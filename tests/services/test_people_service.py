import threading

import pytest

from personhub.database.core.handle import StorageHandle
from personhub.database.core.main import build_engine
from personhub.database.models import Base
from personhub.domain.entities.person import Person
from personhub.domain.enums import CreateOutcome
from personhub.domain.errors import NotFoundError, StorageError, ValidationError
from personhub.services.people.service import (
    create_person, delete_person, get_person, list_people, update_person,
)


# ----- Create -----------------------------------------------------------------

def test_create_is_idempotent_on_full_name(handle):
    first, o1 = create_person(handle, Person(firstname="John", lastname="Doe"))
    again, o2 = create_person(handle, Person(firstname="John", lastname="Doe"))

    assert o1 is CreateOutcome.created
    assert o2 is CreateOutcome.already_exists
    assert again.id == first.id
    assert again.created_at == first.created_at
    assert len(list_people(handle)) == 1


def test_create_distinct_names_get_distinct_ids(handle):
    a, _ = create_person(handle, Person(firstname="John", lastname="Doe"))
    b, _ = create_person(handle, Person(firstname="Jane", lastname="Doe"))
    assert a.id != b.id
    assert a.created_at <= a.updated_at


@pytest.mark.parametrize(
    "candidate",
    [
        Person(firstname="", lastname="Doe"),
        Person(firstname="John", lastname=""),
        Person(id=7, firstname="John", lastname="Doe"),
    ],
)
def test_create_rejects_bad_candidates(handle, candidate):
    with pytest.raises(ValidationError):
        create_person(handle, candidate)
    assert list_people(handle) == []


def test_create_surfaces_storage_failures(handle, db_engine):
    Base.metadata.drop_all(bind=db_engine)
    with pytest.raises(StorageError):
        create_person(handle, Person(firstname="John", lastname="Doe"))


def test_concurrent_creates_may_duplicate(tmp_path):
    """Lookup-then-insert is not atomic: two callers that both miss will both insert."""
    engine = build_engine(f"sqlite:///{tmp_path / 'race.db'}")
    Base.metadata.create_all(bind=engine)
    handle = StorageHandle(engine)

    barrier = threading.Barrier(2, timeout=5)

    class _BothMiss:
        # both lookups finish before either insert starts
        def find(self, template):
            found = handle.find(template)
            barrier.wait()
            return found

        def insert(self, person):
            return handle.insert(person)

    outcomes = []

    def _create():
        outcomes.append(create_person(_BothMiss(), Person(firstname="John", lastname="Doe"))[1])

    threads = [threading.Thread(target=_create) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    try:
        assert outcomes == [CreateOutcome.created, CreateOutcome.created]
        assert len(list_people(handle)) == 2
    finally:
        handle.close()


# ----- Get --------------------------------------------------------------------

def test_get_by_identifier_returns_exactly_that_record(handle):
    a, _ = create_person(handle, Person(firstname="Ada", lastname="Lovelace"))
    b, _ = create_person(handle, Person(firstname="Alan", lastname="Turing"))

    assert get_person(handle, Person(id=b.id)) == b
    assert get_person(handle, Person(id=a.id)) == a


def test_get_missing_is_not_found(handle):
    create_person(handle, Person(firstname="Ada", lastname="Lovelace"))
    with pytest.raises(NotFoundError):
        get_person(handle, Person(id=999))
    with pytest.raises(NotFoundError):
        get_person(handle, Person(firstname="Grace", lastname="Hopper"))


def test_get_with_empty_template_is_rejected(handle):
    create_person(handle, Person(firstname="Ada", lastname="Lovelace"))
    with pytest.raises(ValidationError):
        get_person(handle, Person())


# ----- Update -----------------------------------------------------------------

def test_update_changes_only_the_target(handle):
    target, _ = create_person(handle, Person(firstname="John", lastname="Doe"))
    other, _ = create_person(handle, Person(firstname="Jane", lastname="Roe"))

    updated = update_person(handle, Person(id=target.id, firstname="Johnny", lastname="Doe"))

    assert updated.id == target.id
    assert updated.firstname == "Johnny"
    assert updated.created_at == target.created_at
    assert updated.updated_at >= target.updated_at
    assert get_person(handle, Person(id=other.id)) == other


def test_update_refreshes_timestamp_even_without_changes(handle):
    p, _ = create_person(handle, Person(firstname="John", lastname="Doe"))
    again = update_person(handle, p)
    assert again.created_at == p.created_at
    assert again.updated_at >= p.updated_at


def test_update_requires_identifier_and_existing_row(handle):
    with pytest.raises(ValidationError):
        update_person(handle, Person(firstname="John", lastname="Doe"))
    with pytest.raises(NotFoundError):
        update_person(handle, Person(id=404, firstname="John", lastname="Doe"))


# ----- Delete -----------------------------------------------------------------

def test_delete_then_get_is_not_found(handle):
    p, _ = create_person(handle, Person(firstname="John", lastname="Doe"))
    delete_person(handle, Person(id=p.id))

    with pytest.raises(NotFoundError):
        get_person(handle, Person(id=p.id))
    with pytest.raises(NotFoundError):
        delete_person(handle, Person(id=p.id))


def test_john_doe_scenario(handle):
    first, outcome = create_person(handle, Person(firstname="John", lastname="Doe"))
    assert (outcome, first.id) == (CreateOutcome.created, 1)

    second, outcome = create_person(handle, Person(firstname="John", lastname="Doe"))
    assert (outcome, second.id) == (CreateOutcome.already_exists, 1)

    assert [p.id for p in list_people(handle)] == [1]

    delete_person(handle, Person(firstname="John", lastname="Doe"))
    assert list_people(handle) == []
