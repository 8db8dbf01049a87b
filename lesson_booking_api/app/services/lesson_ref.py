"""
Lesson references.

Clients address lessons either by the store's ObjectId or by the
human‑assigned numeric ``id`` field, depending on where their copy of
the catalog came from.  ``resolve_lesson_ref`` classifies a raw value
into one of three tagged references, tried in order:

1. ``OpaqueRef``: a valid 24‑hex ObjectId string, matched on ``_id``.
2. ``NumericRef``: a number, or a string that parses as a finite
   number, matched on ``id``.
3. ``RawRef``: anything else, matched on ``id`` as given.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union

from bson import ObjectId

Number = Union[int, float]


def parse_number(value: Any) -> Optional[Number]:
    """Interpret ``value`` as a finite number.

    Integers and floats are returned unchanged, numeric strings are
    parsed (integral values come back as ``int``).  Booleans, blank
    strings, ``nan``/``inf`` and everything else yield ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class OpaqueRef:
    object_id: ObjectId

    def to_filter(self) -> dict[str, Any]:
        return {"_id": self.object_id}


@dataclass(frozen=True)
class NumericRef:
    id: Number

    def to_filter(self) -> dict[str, Any]:
        return {"id": self.id}


@dataclass(frozen=True)
class RawRef:
    value: Any

    def to_filter(self) -> dict[str, Any]:
        return {"id": self.value}


LessonRef = Union[OpaqueRef, NumericRef, RawRef]


def resolve_lesson_ref(value: Any) -> LessonRef:
    """Classify a client‑supplied lesson identifier."""
    if isinstance(value, ObjectId):
        return OpaqueRef(value)
    if isinstance(value, str) and ObjectId.is_valid(value):
        return OpaqueRef(ObjectId(value))
    number = parse_number(value)
    if number is not None:
        return NumericRef(number)
    return RawRef(value)
