"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored documents so the API
representation (aliases, string ObjectIds) stays independent of
MongoDB.
"""
