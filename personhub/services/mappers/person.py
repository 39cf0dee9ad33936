# personhub/services/mappers/person.py
from __future__ import annotations

from personhub.domain.entities.person import Person
from personhub.services.schemas.people import (
    PersonCreate, PersonUpdate, PersonQuery, PersonRead,
)

def to_domain_from_create(s: PersonCreate) -> Person:
    return Person(id=s.id, firstname=s.firstname, lastname=s.lastname)

def to_domain_from_update(s: PersonUpdate) -> Person:
    return Person(id=s.id, firstname=s.firstname, lastname=s.lastname)

def to_domain_from_query(s: PersonQuery) -> Person:
    return Person(id=s.id, firstname=s.firstname or "", lastname=s.lastname or "")

def to_read(p: Person) -> PersonRead:
    return PersonRead.model_validate(p)
