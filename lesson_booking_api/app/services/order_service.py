"""
Business logic for placing orders.

Placing an order is two independent store steps: the order document
is inserted into ``Orders``, then every line item decrements the
``spaces`` of the lesson it references.  The decrements are issued
concurrently with ``$inc`` so concurrent orders never lose an update,
but nothing wraps the insert and the decrements in a transaction and
there is no floor at zero.  If a decrement fails the order remains
stored; each failed line is logged with the order id so the capacity
can be corrected by hand, and the failure is re‑raised to the caller.
"""

import asyncio
import logging
from typing import Any, Mapping

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from lesson_booking_api.app.core.db import DocumentCollection
from lesson_booking_api.app.core.exceptions import InvalidPayloadError
from lesson_booking_api.app.schemas.order import OrderCreate, OrderReceipt
from lesson_booking_api.app.services.lesson_ref import LessonRef, parse_number, resolve_lesson_ref

logger = logging.getLogger(__name__)


class OrderService:
    """Service for recording orders and decrementing lesson capacity."""

    def __init__(self, orders: DocumentCollection, lessons: DocumentCollection) -> None:
        self.orders = orders
        self.lessons = lessons

    @staticmethod
    def validate(payload: Any) -> OrderCreate:
        """Validate a raw order payload, raising ``InvalidPayloadError``."""
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("Invalid order payload")
        try:
            return OrderCreate.model_validate(dict(payload))
        except ValidationError as e:
            raise InvalidPayloadError("Invalid order payload") from e

    async def place_order(self, payload: Any) -> OrderReceipt:
        """Validate, persist and apply an order.

        Returns the receipt carrying the new order id.  Validation
        failures raise ``InvalidPayloadError`` before anything is
        written; a failed insert propagates before any decrement.
        """
        order = self.validate(payload)

        result = await run_in_threadpool(self.orders.insert_one, order.to_document())
        order_id = str(result.inserted_id)
        logger.info(
            "Order %s saved: %d line(s), %s space(s)",
            order_id,
            len(order.lesson_ids),
            order.number_of_space,
        )

        decrements = []
        for line in order.lesson_ids:
            qty = parse_number(line.get("qty"))
            if qty is None or qty <= 0:
                continue
            reference = line.get("lessonId")
            if reference is None:
                # {"id": None} would also match lessons that have no id field.
                logger.warning("Order %s: line without lessonId, spaces not decremented", order_id)
                continue
            ref = resolve_lesson_ref(reference)
            decrements.append(self._decrement(order_id, ref, qty))

        outcomes = await asyncio.gather(*decrements, return_exceptions=True)
        failures = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
        if failures:
            raise failures[0]

        return OrderReceipt(message="Order saved", order_id=order_id)

    async def _decrement(self, order_id: str, ref: LessonRef, qty: float) -> None:
        try:
            result = await run_in_threadpool(
                self.lessons.update_one, ref.to_filter(), {"$inc": {"spaces": -qty}}
            )
        except Exception:
            logger.exception("Order %s: failed to decrement spaces of %r by %s", order_id, ref, qty)
            raise
        if result.matched_count == 0:
            logger.warning("Order %s: no lesson matches %r, spaces not decremented", order_id, ref)
        else:
            logger.info("Order %s: decremented spaces of %r by %s", order_id, ref, qty)
