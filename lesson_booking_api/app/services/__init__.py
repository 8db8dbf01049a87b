"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its collections through the constructor, so tests can pass in‑memory
fakes instead of a live MongoDB.
"""
