"""
MongoDB integration.

This module opens the single long‑lived ``MongoClient`` used by the
service and exposes helpers for reaching the ``Lessons`` and ``Orders``
collections.  Services never import a client themselves; they receive
collection handles from the FastAPI dependencies in
``api.dependencies``, which read the database stored on
``app.state``.  Anything implementing :class:`DocumentCollection` can
stand in for a real collection, which is how the test suite runs
without a server.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Protocol

from pymongo import MongoClient
from pymongo.database import Database

from .config import Settings, settings

LESSONS_COLLECTION = "Lessons"
ORDERS_COLLECTION = "Orders"

logger = logging.getLogger(__name__)


class DocumentCollection(Protocol):
    """The subset of the pymongo ``Collection`` API used by the services."""

    def find(self, filter: Optional[Mapping[str, Any]] = None) -> Iterable[dict]: ...

    def insert_one(self, document: dict) -> Any: ...

    def insert_many(self, documents: Iterable[dict]) -> Any: ...

    def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> Any: ...

    def delete_many(self, filter: Mapping[str, Any]) -> Any: ...


class DocumentDatabase(Protocol):
    """A database handle: collections are looked up by name."""

    def __getitem__(self, name: str) -> DocumentCollection: ...


def create_client(config: Settings = settings) -> MongoClient:
    """Create a ``MongoClient`` for the configured URI.

    pymongo connects lazily; call :func:`ping` to fail fast when the
    server is unreachable.
    """
    return MongoClient(config.database_uri)


def ping(client: MongoClient) -> None:
    """Round‑trip a ``ping`` command, raising ``PyMongoError`` on failure."""
    client.admin.command("ping")


def connect(config: Settings = settings) -> tuple[MongoClient, Database]:
    """Open the client, verify connectivity and return it with the database."""
    client = create_client(config)
    try:
        ping(client)
    except Exception:
        client.close()
        raise
    logger.info("Connected to MongoDB database %r", config.db_name)
    return client, client[config.db_name]


def lessons_collection(database: DocumentDatabase) -> DocumentCollection:
    return database[LESSONS_COLLECTION]


def orders_collection(database: DocumentDatabase) -> DocumentCollection:
    return database[ORDERS_COLLECTION]
