"""
Order endpoint.

``POST /orders`` records an order and decrements the spaces of every
lesson it books.  The body is validated by the ``OrderService`` rather
than by FastAPI so that malformed payloads produce a 400 with the same
``{"error": ...}`` body as the other client errors.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from lesson_booking_api.app.api.dependencies import get_order_service
from lesson_booking_api.app.core.exceptions import InvalidPayloadError
from lesson_booking_api.app.schemas.order import OrderReceipt
from lesson_booking_api.app.services.order_service import OrderService

router = APIRouter()


@router.post("", response_model=OrderReceipt, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: Any = Body(
        None,
        example={
            "name": "Jane Doe",
            "phone": "07123456789",
            "lessonIDs": [{"lessonId": 1, "qty": 2}],
            "numberOfSpace": 2,
        },
    ),
    service: OrderService = Depends(get_order_service),
) -> OrderReceipt:
    """Save an order.

    Body: ``{name, phone, lessonIDs: [{lessonId, qty}], numberOfSpace}``.
    Returns ``{message, orderId}``.
    """
    try:
        return await service.place_order(payload)
    except InvalidPayloadError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
