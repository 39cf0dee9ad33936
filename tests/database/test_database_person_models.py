# tests/database/test_database_person_models.py
from sqlalchemy import inspect

from personhub.database.models.person import Person
from personhub.domain.entities.person import Person as DomainPerson


def test_people_table_layout(db_engine):
    insp = inspect(db_engine)
    cols = [c["name"] for c in insp.get_columns("people")]
    # ServiceObject columns are ordered first
    assert cols[:3] == ["id", "created_at", "updated_at"]
    assert set(cols) == {"id", "created_at", "updated_at", "firstname", "lastname"}

    idx = {i["name"]: i["column_names"] for i in insp.get_indexes("people")}
    assert idx["ix_people_natural_key"] == ["firstname", "lastname"]


def test_same_full_name_is_not_storage_enforced(db):
    db.add_all([Person(firstname="Jane", lastname="Doe"), Person(firstname="Jane", lastname="Doe")])
    db.flush()
    assert db.query(Person).count() == 2


def test_identifiers_are_not_reused(handle):
    first = handle.insert(DomainPerson(firstname="A", lastname="One"))
    second = handle.insert(DomainPerson(firstname="B", lastname="Two"))
    handle.delete(DomainPerson(id=second.id))

    third = handle.insert(DomainPerson(firstname="C", lastname="Three"))
    assert (first.id, second.id) == (1, 2)
    assert third.id == 3
