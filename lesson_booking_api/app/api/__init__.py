"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` that includes every
domain router from ``endpoints``; ``dependencies.py`` wires the shared
database handle into the services.
"""
