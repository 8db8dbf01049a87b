"""
Search endpoint.

``GET /search?q=...`` matches the term against subject, location and
icon, and against price or spaces when the term is numeric.  An empty
or missing ``q`` returns the full catalog, which is what the frontend
relies on when the search box is cleared.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from lesson_booking_api.app.api.dependencies import get_lesson_service
from lesson_booking_api.app.schemas.lesson import LESSON_EXAMPLE
from lesson_booking_api.app.services.lesson_service import LessonService

router = APIRouter()


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={200: {"content": {"application/json": {"example": [LESSON_EXAMPLE]}}}},
)
async def search_lessons(
    q: Optional[str] = Query(None, description="Search term"),
    service: LessonService = Depends(get_lesson_service),
) -> List[Dict[str, Any]]:
    return await service.search_lessons(q)
