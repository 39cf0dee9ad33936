# personhub/database/models/__init__.py

from personhub.database.core.main import Base
from personhub.database.models.person import Person

__all__ = [
    "Base",
    "Person",
]
