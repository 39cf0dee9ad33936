# personhub/database/core/handle.py
from __future__ import annotations

from typing import Callable, List, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from personhub.database.core.main import make_sessionmaker, session_scope
from personhub.database.repos.people_repo import SqlAlchemyPeopleRepo
from personhub.domain.entities.person import Person
from personhub.domain.errors import StorageError

T = TypeVar("T")


class StorageHandle:
    """
    Live connection to the people store. Shared by every request; each call
    runs in its own short transaction, so there is no state between calls.

    Satisfies PersonStorePort. SQLAlchemy failures surface as StorageError;
    NotFoundError/ValidationError raised by the repo pass through untouched.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = make_sessionmaker(engine)

    def _run(self, op: Callable[[SqlAlchemyPeopleRepo], T]) -> T:
        try:
            with session_scope(self._sessions) as session:
                return op(SqlAlchemyPeopleRepo(session))
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    # -------- PersonStorePort --------

    def find(self, template: Person) -> Optional[Person]:
        return self._run(lambda repo: repo.find(template))

    def insert(self, person: Person) -> Person:
        return self._run(lambda repo: repo.insert(person))

    def save(self, person: Person) -> Person:
        return self._run(lambda repo: repo.save(person))

    def delete(self, template: Person) -> None:
        self._run(lambda repo: repo.delete(template))

    def list(self) -> List[Person]:
        return self._run(lambda repo: repo.list())

    # -------- lifecycle --------

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True

    def close(self) -> None:
        self.engine.dispose()
