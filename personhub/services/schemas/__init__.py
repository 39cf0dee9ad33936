from personhub.services.schemas.people import (
    PersonCreate,
    PersonUpdate,
    PersonQuery,
    PersonRead,
    StatusRead,
    PersonStatusRead,
    PersonListRead,
    ErrorRead,
)

__all__ = [
    "PersonCreate",
    "PersonUpdate",
    "PersonQuery",
    "PersonRead",
    "StatusRead",
    "PersonStatusRead",
    "PersonListRead",
    "ErrorRead",
]
