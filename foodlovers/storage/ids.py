from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


class LookupStatus(str, Enum):
    found = "found"
    not_found = "not_found"
    malformed = "malformed"


@dataclass(frozen=True)
class Lookup:
    status: LookupStatus
    document: dict[str, Any] | None = None


MALFORMED = Lookup(LookupStatus.malformed)
NOT_FOUND = Lookup(LookupStatus.not_found)


def parse_object_id(value: Any) -> ObjectId | None:
    """Return an ``ObjectId`` for a 24-hex string, ``None`` for anything else."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or len(value) != 24:
        return None
    try:
        return ObjectId(value)
    except InvalidId:
        return None
