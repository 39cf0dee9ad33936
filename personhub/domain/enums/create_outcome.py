from __future__ import annotations
from enum import StrEnum

class CreateOutcome(StrEnum):
    created = "created"
    already_exists = "already_exists"
