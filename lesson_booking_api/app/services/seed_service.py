"""
Catalog seeding.

``seed_database`` resets a database to the fixed starting catalog:
the ``Lessons`` collection is cleared and repopulated with ten
lessons of five spaces each, and ``Orders`` is emptied.  It is run
from the ``seed.py`` script, never by the API itself.
"""

import logging
from dataclasses import dataclass

from lesson_booking_api.app.core.db import DocumentDatabase, lessons_collection, orders_collection

logger = logging.getLogger(__name__)

SEED_LESSONS: tuple[dict, ...] = (
    {"id": 1, "subject": "Math", "location": "Hendon", "price": 100, "spaces": 5, "icon": "fa-solid fa-calculator"},
    {"id": 2, "subject": "English", "location": "Colindale", "price": 80, "spaces": 5, "icon": "fa-solid fa-book"},
    {"id": 3, "subject": "Science", "location": "Brent Cross", "price": 90, "spaces": 5, "icon": "fa-solid fa-flask"},
    {"id": 4, "subject": "Art", "location": "Golders G", "price": 95, "spaces": 5, "icon": "fa-solid fa-palette"},
    {"id": 5, "subject": "Music", "location": "Hendon", "price": 85, "spaces": 5, "icon": "fa-solid fa-music"},
    {"id": 6, "subject": "Coding", "location": "Colindale", "price": 120, "spaces": 5, "icon": "fa-solid fa-laptop-code"},
    {"id": 7, "subject": "Dance", "location": "Brent Cross", "price": 70, "spaces": 5, "icon": "fa-solid fa-person-dance"},
    {"id": 8, "subject": "French", "location": "Golders G", "price": 75, "spaces": 5, "icon": "fa-solid fa-language"},
    {"id": 9, "subject": "History", "location": "Hendon", "price": 65, "spaces": 5, "icon": "fa-solid fa-landmark"},
    {"id": 10, "subject": "Sports", "location": "Colindale", "price": 60, "spaces": 5, "icon": "fa-solid fa-basketball"},
)


@dataclass
class SeedSummary:
    lessons_removed: int
    lessons_inserted: int
    orders_removed: int


def seed_database(database: DocumentDatabase) -> SeedSummary:
    """Replace the catalog with ``SEED_LESSONS`` and clear all orders."""
    lessons = lessons_collection(database)
    orders = orders_collection(database)

    removed = lessons.delete_many({}).deleted_count
    logger.info("Cleared %d existing lesson(s)", removed)

    # insert_many mutates the documents (adds ``_id``), so pass copies.
    inserted = len(lessons.insert_many([dict(lesson) for lesson in SEED_LESSONS]).inserted_ids)
    logger.info("Inserted %d lesson(s)", inserted)

    orders_removed = orders.delete_many({}).deleted_count
    logger.info("Cleared %d existing order(s)", orders_removed)

    return SeedSummary(lessons_removed=removed, lessons_inserted=inserted, orders_removed=orders_removed)
