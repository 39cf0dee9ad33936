from __future__ import annotations
from typing import List, Optional, Protocol
from personhub.domain.entities.person import Person

class PersonStorePort(Protocol):
    def find(self, template: Person) -> Optional[Person]: ...
    def insert(self, person: Person) -> Person: ...
    def save(self, person: Person) -> Person: ...
    def delete(self, template: Person) -> None: ...
    def list(self) -> List[Person]: ...
