"""
Lesson representations.

Lessons are stored as free-form MongoDB documents and returned
verbatim: whatever fields and value types a document holds are what
the client sees.  The only conversion is the store identifier, whose
``ObjectId`` becomes its hex string under the same ``_id`` key.
"""

from typing import Any, Dict, Mapping

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

# Fields accepted by ``PUT /lessons/{id}``; anything else is dropped.
UPDATABLE_FIELDS = ("subject", "location", "price", "spaces", "icon", "id")

# Example lesson shown in the OpenAPI docs.
LESSON_EXAMPLE = {
    "_id": "65f1c0c2a1b2c3d4e5f60718",
    "id": 1,
    "subject": "Math",
    "location": "Hendon",
    "price": 100,
    "spaces": 5,
    "icon": "fa-solid fa-calculator",
}


def lesson_to_json(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a stored lesson as JSON-ready data, without reshaping it."""
    return jsonable_encoder(dict(document), custom_encoder={ObjectId: str})


def select_updatable(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep the allow-listed keys of ``fields``; values pass through as given."""
    return {key: fields[key] for key in UPDATABLE_FIELDS if key in fields}


class MessageResponse(BaseModel):
    message: str
