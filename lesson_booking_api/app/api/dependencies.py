"""
FastAPI dependencies that hand services their collections.

The database handle is created once (either injected into
``create_app`` or opened by the startup hook) and stored on
``app.state.database``; every request builds its services around it.
"""

from fastapi import Depends, Request

from lesson_booking_api.app.core.db import DocumentDatabase, lessons_collection, orders_collection
from lesson_booking_api.app.services.lesson_service import LessonService
from lesson_booking_api.app.services.order_service import OrderService


def get_database(request: Request) -> DocumentDatabase:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database connection has not been initialised")
    return database


def get_lesson_service(database: DocumentDatabase = Depends(get_database)) -> LessonService:
    return LessonService(lessons_collection(database))


def get_order_service(database: DocumentDatabase = Depends(get_database)) -> OrderService:
    return OrderService(orders_collection(database), lessons_collection(database))
