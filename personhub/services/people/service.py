from __future__ import annotations

from typing import List, Tuple

from personhub.common.logging import get_logger
from personhub.domain.entities.person import Person
from personhub.domain.enums import CreateOutcome
from personhub.domain.errors import NotFoundError, ValidationError
from personhub.domain.ports.storage import PersonStorePort

logger = get_logger()


# Every operation takes the store explicitly and keeps no state of its own.
# Check-then-act sequences here are not atomic across concurrent callers.


def create_person(handle: PersonStorePort, candidate: Person) -> Tuple[Person, CreateOutcome]:
    """
    Idempotent create keyed on (firstname, lastname).

    An existing match is returned with ``already_exists``; that is a success,
    not an error. Otherwise the candidate is inserted and returned with
    ``created``. Two people sharing a full name cannot both be stored.
    """
    if candidate.has_identifier():
        raise ValidationError("id is assigned by storage and must not be supplied")
    if not candidate.has_names():
        raise ValidationError("firstname and lastname are required")

    existing = handle.find(candidate.by_natural_key())
    if existing is not None:
        return existing, CreateOutcome.already_exists

    person = handle.insert(candidate)
    logger.info("person %s created (%s %s)", person.id, *person.natural_key)
    return person, CreateOutcome.created


def get_person(handle: PersonStorePort, query: Person) -> Person:
    """First record matching every populated field of ``query`` (lowest id first)."""
    found = handle.find(query)
    if found is None:
        raise NotFoundError("person not found")
    return found


def list_people(handle: PersonStorePort) -> List[Person]:
    return handle.list()


def update_person(handle: PersonStorePort, record: Person) -> Person:
    """
    Replace the names of the record with ``record.id`` and refresh its
    updated_at. created_at never changes. Raises NotFoundError when the row
    is gone by the time of the write.
    """
    if not record.has_identifier():
        raise ValidationError("id is required to update a person")
    if not record.has_names():
        raise ValidationError("firstname and lastname are required")
    person = handle.save(record)
    logger.info("person %s updated", person.id)
    return person


def delete_person(handle: PersonStorePort, query: Person) -> None:
    """Permanently remove the first match; nothing matched is NotFoundError."""
    handle.delete(query)
    logger.info("person deleted (%s)", query.filters())
