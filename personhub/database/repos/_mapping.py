# personhub/database/repos/_mapping.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
from personhub.database.models.person import Person as DBPerson
from personhub.domain.entities.person import Person as DomainPerson


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; everything we store is UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_domain_person(row: DBPerson) -> DomainPerson:
    return DomainPerson(
        id=row.id,
        firstname=row.firstname,
        lastname=row.lastname,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )
