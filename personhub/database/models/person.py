# personhub/database/models/person.py
from __future__ import annotations

from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column

from personhub.database.core.main import Base
from personhub.database.core.service_object import ServiceObject


# =======================
# People
# =======================
class Person(ServiceObject, Base):
    """
    Person record:
      - firstname, lastname (together the natural lookup key; not unique)
      - id/created_at/updated_at from ServiceObject
    """
    __tablename__ = "people"
    __table_args__ = (
        Index("ix_people_natural_key", "firstname", "lastname"),
        # ids are never reused, even after the newest row is deleted
        {"sqlite_autoincrement": True},
    )

    firstname: Mapped[str] = mapped_column(String(255), nullable=False)
    lastname: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.firstname!r} {self.lastname!r}>"
