"""Pytest fixtures: an in‑memory stand‑in for the MongoDB collections.

``FakeCollection`` implements only what the services use: ``find``
with equality, ``$or`` and ``$regex`` filters, ``update_one`` with
``$set``/``$inc``, ``insert_one``, ``insert_many`` and ``delete_many``.
Writes are serialised with a lock so ``$inc`` stays atomic when the
services call in from the threadpool, as it is on a real server.
"""

import copy
import re
import threading

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import DeleteResult, InsertManyResult, InsertOneResult, UpdateResult

from lesson_booking_api.app.main import create_app
from lesson_booking_api.app.services.seed_service import seed_database

_MISSING = object()


def _matches(document, query):
    for key, condition in query.items():
        if key == "$or":
            if not any(_matches(document, clause) for clause in condition):
                return False
            continue
        value = document.get(key, _MISSING)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif condition is None:
            # As on the server, null also matches a missing field.
            if value not in (None, _MISSING):
                return False
        elif value is _MISSING or isinstance(value, bool) != isinstance(condition, bool) or value != condition:
            return False
    return True


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.documents = []
        # operation name -> exception raised on the next calls
        self.failures = {}
        self.calls = []
        self._lock = threading.Lock()

    def _record(self, operation, *args):
        self.calls.append((operation,) + args)
        if operation in self.failures:
            raise self.failures[operation]

    def find(self, filter=None):
        self._record("find", filter)
        with self._lock:
            return [copy.deepcopy(doc) for doc in self.documents if _matches(doc, filter or {})]

    def insert_one(self, document):
        self._record("insert_one", document)
        document.setdefault("_id", ObjectId())
        with self._lock:
            self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    def insert_many(self, documents):
        documents = list(documents)
        self._record("insert_many", documents)
        with self._lock:
            for document in documents:
                document.setdefault("_id", ObjectId())
                self.documents.append(copy.deepcopy(document))
        return InsertManyResult([doc["_id"] for doc in documents], True)

    def update_one(self, filter, update):
        self._record("update_one", filter, update)
        with self._lock:
            for document in self.documents:
                if _matches(document, filter):
                    for key, value in update.get("$set", {}).items():
                        document[key] = value
                    for key, value in update.get("$inc", {}).items():
                        document[key] = document.get(key, 0) + value
                    return UpdateResult({"n": 1, "nModified": 1}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    def delete_many(self, filter):
        self._record("delete_many", filter)
        with self._lock:
            keep = [doc for doc in self.documents if not _matches(doc, filter)]
            deleted = len(self.documents) - len(keep)
            self.documents = keep
        return DeleteResult({"n": deleted}, True)

    def writes(self):
        return [call for call in self.calls if call[0] != "find"]


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


@pytest.fixture
def database() -> FakeDatabase:
    database = FakeDatabase()
    seed_database(database)
    # Start every test with a clean call log.
    for collection in database.collections.values():
        collection.calls.clear()
    return database


@pytest.fixture
def lessons(database) -> FakeCollection:
    return database["Lessons"]


@pytest.fixture
def orders(database) -> FakeCollection:
    return database["Orders"]


def lesson_by_id(collection, lesson_id):
    return next(doc for doc in collection.documents if doc.get("id") == lesson_id)


@pytest.fixture
def public_dir(tmp_path):
    images = tmp_path / "images"
    images.mkdir()
    (images / "math.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    (tmp_path / "index.html").write_text("<html><body>Lessons</body></html>", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(database, public_dir) -> TestClient:
    app = create_app(database=database, public_dir=str(public_dir))
    return TestClient(app, raise_server_exceptions=False)
