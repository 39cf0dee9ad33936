# personhub/domain/entities/person.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


@dataclass
class Person:
    """
    Core domain entity for a person record. Persistence fields (id, timestamps)
    are None until storage assigns them.

    A Person also doubles as a query *template*: every populated field
    (id not None/0, non-empty names) is an equality filter.
    """
    id: Optional[int] = None
    firstname: str = ""
    lastname: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def natural_key(self) -> Tuple[str, str]:
        return (self.firstname, self.lastname)

    def has_identifier(self) -> bool:
        return bool(self.id)

    def has_names(self) -> bool:
        return bool(self.firstname) and bool(self.lastname)

    def filters(self) -> Dict[str, Any]:
        """Non-zero fields of this value, as column -> value."""
        out: Dict[str, Any] = {}
        if self.id:
            out["id"] = self.id
        if self.firstname:
            out["firstname"] = self.firstname
        if self.lastname:
            out["lastname"] = self.lastname
        if self.created_at is not None:
            out["created_at"] = self.created_at
        if self.updated_at is not None:
            out["updated_at"] = self.updated_at
        return out

    def by_natural_key(self) -> "Person":
        """Template matching only (firstname, lastname)."""
        return Person(firstname=self.firstname, lastname=self.lastname)

    def by_identifier(self) -> "Person":
        return Person(id=self.id)

