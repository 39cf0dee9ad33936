# personhub/services/api/routers/people.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from personhub.common.settings import get_settings
from personhub.database.core.handle import StorageHandle
from personhub.domain.enums import CreateOutcome
from personhub.services.api.deps import get_handle
from personhub.services.mappers.person import (
    to_domain_from_create, to_domain_from_update, to_domain_from_query, to_read,
)
from personhub.services.people import service
from personhub.services.schemas.people import (
    PersonCreate, PersonUpdate, PersonQuery,
    StatusRead, PersonStatusRead, PersonListRead, ErrorRead,
)

cfg = get_settings()
router = APIRouter(
    prefix=f"{cfg.api.prefix}/person",
    tags=["people"],
    responses={400: {"model": ErrorRead}, 500: {"model": ErrorRead}},
)

CREATE_STATUS = {
    CreateOutcome.created: "person added",
    CreateOutcome.already_exists: "person already exists",
}


@router.post("", response_model=PersonStatusRead)
def add_person(
    payload: PersonCreate,
    handle: StorageHandle = Depends(get_handle),
) -> PersonStatusRead:
    person, outcome = service.create_person(handle, to_domain_from_create(payload))
    return PersonStatusRead(status=CREATE_STATUS[outcome], person=to_read(person))


@router.get("", response_model=PersonListRead)
def list_persons(handle: StorageHandle = Depends(get_handle)) -> PersonListRead:
    return PersonListRead(persons=[to_read(p) for p in service.list_people(handle)])


@router.put("", response_model=StatusRead)
def update_person(
    payload: PersonUpdate,
    handle: StorageHandle = Depends(get_handle),
) -> StatusRead:
    record = to_domain_from_update(payload)
    # confirm the target exists; the save re-checks in case it vanished since
    service.get_person(handle, record.by_identifier())
    service.update_person(handle, record)
    return StatusRead(status="person updated")


@router.delete("", response_model=StatusRead)
def delete_person(
    payload: PersonQuery,
    handle: StorageHandle = Depends(get_handle),
) -> StatusRead:
    query = to_domain_from_query(payload)
    service.get_person(handle, query)
    service.delete_person(handle, query)
    return StatusRead(status="person deleted")
