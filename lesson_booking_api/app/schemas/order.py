"""
Pydantic models for orders.

The wire format uses the camelCase keys the booking frontend sends
(``lessonIDs``, ``numberOfSpace``); the models expose snake_case
attributes and keep the wire keys as aliases.  Line items are kept
as plain mappings because they are persisted exactly as submitted.
"""

from typing import Any, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr


class OrderCreate(BaseModel):
    """Schema for placing an order."""

    name: StrictStr = Field(..., min_length=1, example="Jane Doe")
    phone: StrictStr = Field(..., min_length=1, example="07123456789")
    lesson_ids: list[dict[str, Any]] = Field(
        ...,
        alias="lessonIDs",
        description="Requested lessons as ``{lessonId, qty}`` objects",
        example=[{"lessonId": 1, "qty": 2}],
    )
    number_of_space: Union[StrictInt, StrictFloat] = Field(..., alias="numberOfSpace", example=2)

    model_config = {
        "populate_by_name": True,
    }

    def to_document(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "phone": self.phone,
            "lessonIDs": self.lesson_ids,
            "numberOfSpace": self.number_of_space,
        }


class OrderReceipt(BaseModel):
    """Response returned after an order has been saved."""

    message: str = Field("Order saved", example="Order saved")
    order_id: str = Field(..., alias="orderId", example="65f1c0c2a1b2c3d4e5f60718")

    model_config = {
        "populate_by_name": True,
    }
