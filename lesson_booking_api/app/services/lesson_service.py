"""
Business logic for the lesson catalog.

The ``LessonService`` lists and searches lessons and applies partial
updates from the admin endpoint.  It works against any
``DocumentCollection``; in production that is the ``Lessons``
collection of the shared MongoDB client.  pymongo is synchronous, so
every store call is pushed to the threadpool to keep the event loop
free.
"""

import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from fastapi.concurrency import run_in_threadpool

from lesson_booking_api.app.core.db import DocumentCollection
from lesson_booking_api.app.core.exceptions import InvalidPayloadError, LessonNotFoundError
from lesson_booking_api.app.schemas.lesson import lesson_to_json, select_updatable
from lesson_booking_api.app.services.lesson_ref import parse_number, resolve_lesson_ref

logger = logging.getLogger(__name__)

# Text fields matched by the free‑text search.
SEARCH_TEXT_FIELDS = ("subject", "location", "icon")
# Numeric fields compared for equality when the search term is a number.
SEARCH_NUMBER_FIELDS = ("price", "spaces")


def build_search_query(term: Optional[str]) -> dict[str, Any]:
    """Translate a search term into a MongoDB filter.

    An empty term produces an empty filter (match everything).  The
    term is matched literally and case‑insensitively as a substring of
    the text fields; a numeric term additionally matches ``price`` or
    ``spaces`` exactly.
    """
    term = (term or "").strip()
    if not term:
        return {}
    pattern = {"$regex": re.escape(term), "$options": "i"}
    clauses: list[dict[str, Any]] = [{field: pattern} for field in SEARCH_TEXT_FIELDS]
    number = parse_number(term)
    if number is not None:
        clauses.extend({field: number} for field in SEARCH_NUMBER_FIELDS)
    return {"$or": clauses}


class LessonService:
    """Сервис каталога занятий: список, поиск и частичное обновление."""

    def __init__(self, lessons: DocumentCollection) -> None:
        self.lessons = lessons

    async def list_lessons(self) -> List[Dict[str, Any]]:
        """Return every lesson in the store's natural order."""
        return await self._find({})

    async def search_lessons(self, term: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return lessons matching ``term``; a blank term lists everything."""
        query = build_search_query(term)
        lessons = await self._find(query)
        logger.debug("Search %r matched %d lessons", term, len(lessons))
        return lessons

    async def update_lesson(self, reference: Any, fields: Mapping[str, Any]) -> None:
        """Overwrite the allowed fields of a single lesson.

        Keys outside the updatable set are dropped; the values of the
        remaining keys are written exactly as supplied.  Raises
        ``InvalidPayloadError`` when nothing updatable remains and
        ``LessonNotFoundError`` when the reference matches no lesson.
        Never upserts.
        """
        if not isinstance(fields, Mapping):
            raise InvalidPayloadError("No updatable fields provided")
        changes = select_updatable(fields)
        if not changes:
            raise InvalidPayloadError("No updatable fields provided")

        ref = resolve_lesson_ref(reference)
        result = await run_in_threadpool(self.lessons.update_one, ref.to_filter(), {"$set": changes})
        if result.matched_count == 0:
            raise LessonNotFoundError(reference)
        logger.info("Lesson %r updated: %s", reference, sorted(changes))

    async def _find(self, query: dict[str, Any]) -> List[Dict[str, Any]]:
        documents = await run_in_threadpool(lambda: list(self.lessons.find(query)))
        return [lesson_to_json(doc) for doc in documents]
