"""
Application package initializer.

The project is split into ``core`` (configuration, logging, the
MongoDB handle and domain exceptions), ``schemas`` (request and
response models), ``services`` (catalog and order logic) and ``api``
(the HTTP routes).  The services never touch FastAPI request objects,
so they can be exercised directly against any document collection.
"""

from .main import app  # noqa: F401
