"""
Lesson endpoints.

``GET /lessons`` returns the whole catalog and ``PUT /lessons/{id}``
overwrites selected fields of one lesson.  The path identifier may be
the lesson's ObjectId or its numeric ``id``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Path, status

from lesson_booking_api.app.api.dependencies import get_lesson_service
from lesson_booking_api.app.core.exceptions import InvalidPayloadError, LessonNotFoundError
from lesson_booking_api.app.schemas.lesson import LESSON_EXAMPLE, MessageResponse
from lesson_booking_api.app.services.lesson_service import LessonService

router = APIRouter()


@router.get(
    "",
    response_model=List[Dict[str, Any]],
    responses={200: {"content": {"application/json": {"example": [LESSON_EXAMPLE]}}}},
)
async def list_lessons(service: LessonService = Depends(get_lesson_service)) -> List[Dict[str, Any]]:
    """Return every lesson in the catalog."""
    return await service.list_lessons()


@router.put("/{lesson_id}", response_model=MessageResponse)
async def update_lesson(
    lesson_id: str = Path(..., description="ObjectId or numeric id of the lesson"),
    fields: Any = Body(None),
    service: LessonService = Depends(get_lesson_service),
) -> MessageResponse:
    """Update any of ``subject``, ``location``, ``price``, ``spaces``, ``icon`` or ``id``.

    Unknown keys are ignored.  Responds 400 when no updatable field is
    supplied and 404 when no lesson matches ``lesson_id``.
    """
    try:
        await service.update_lesson(lesson_id, fields or {})
    except InvalidPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except LessonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return MessageResponse(message="Lesson updated")
