#!/usr/bin/env python3
"""
Reset the lesson catalog in MongoDB.

Clears the ``Lessons`` collection, inserts the ten starting lessons
(five spaces each) and clears ``Orders``.  Connection details come from
the same environment variables / ``.env`` file as the API; ``--uri``
and ``--db`` override them.

Usage:
    python seed.py
    python seed.py --uri mongodb://localhost:27017 --db AFTER_SCHOOL_LESSONS
"""

import argparse
import dataclasses
import logging
import sys

from pymongo.errors import PyMongoError

from lesson_booking_api.app.core.config import settings
from lesson_booking_api.app.core.db import connect
from lesson_booking_api.app.core.logging_config import setup_logging
from lesson_booking_api.app.services.seed_service import seed_database

logger = logging.getLogger("seed")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Seed the lesson catalog (destroys existing lessons and orders).")
    ap.add_argument("--uri", help="MongoDB connection string (defaults to the configured one)")
    ap.add_argument("--db", help=f"Database name (default: {settings.db_name})")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file)

    config = settings
    if args.uri or args.db:
        config = dataclasses.replace(
            settings,
            mongo_uri=args.uri or settings.mongo_uri,
            db_name=args.db or settings.db_name,
        )

    try:
        client, database = connect(config)
    except PyMongoError:
        logger.exception("Could not connect to MongoDB")
        return 1

    try:
        summary = seed_database(database)
    except PyMongoError:
        logger.exception("Error during seeding")
        return 1
    finally:
        client.close()
        logger.info("MongoDB connection closed")

    logger.info("Database seeding complete: %s", summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
