"""
Top‑level package for the Lesson Booking API.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Import the ASGI application as
``lesson_booking_api.app.main:app``.
"""

__all__ = []
