from __future__ import annotations
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from personhub.database.core.service_object import utcnow
from personhub.database.models.person import Person as DBPerson
from personhub.database.repos._mapping import to_domain_person
from personhub.domain.entities.person import Person
from personhub.domain.errors import NotFoundError, ValidationError


class SqlAlchemyPeopleRepo:
    """
    SQLAlchemy-backed repository satisfying PersonStorePort for one Session.
    The caller owns the transaction (flush here, commit upstream).
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- lookups --------

    def _first_row(self, template: Person) -> Optional[DBPerson]:
        filters = template.filters()
        if not filters:
            raise ValidationError("query template has no populated fields")
        stmt = (
            select(DBPerson)
            .where(and_(*(getattr(DBPerson, col) == val for col, val in filters.items())))
            .order_by(DBPerson.id.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def find(self, template: Person) -> Optional[Person]:
        row = self._first_row(template)
        return to_domain_person(row) if row else None

    def list(self) -> List[Person]:
        stmt = select(DBPerson).order_by(DBPerson.id.asc())
        return [to_domain_person(r) for r in self.db.execute(stmt).scalars().all()]

    # -------- mutations --------

    def insert(self, person: Person) -> Person:
        now = utcnow()
        obj = DBPerson(
            firstname=person.firstname,
            lastname=person.lastname,
            created_at=now,
            updated_at=now,
        )
        self.db.add(obj)
        self.db.flush()  # ensure id
        self.db.refresh(obj)
        return to_domain_person(obj)

    def save(self, person: Person) -> Person:
        if not person.has_identifier():
            raise ValidationError("save requires an identifier")
        obj = self.db.get(DBPerson, person.id)
        if not obj:
            raise NotFoundError(f"person {person.id} not found")
        obj.firstname = person.firstname
        obj.lastname = person.lastname
        # created_at is never touched; updated_at is refreshed even if nothing changed
        obj.updated_at = utcnow()
        self.db.flush()
        self.db.refresh(obj)
        return to_domain_person(obj)

    def delete(self, template: Person) -> None:
        obj = self._first_row(template)
        if not obj:
            raise NotFoundError("person not found")
        self.db.delete(obj)
        self.db.flush()
