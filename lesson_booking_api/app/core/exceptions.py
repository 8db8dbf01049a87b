"""
Domain exceptions raised by the service layer.

Services raise these instead of ``HTTPException`` so they stay usable
outside a request.  Endpoints translate them into HTTP errors: invalid
payloads become 400 responses and missing lessons become 404.
"""


class InvalidPayloadError(ValueError):
    """A request body is missing required fields or has the wrong types."""


class LessonNotFoundError(LookupError):
    """No lesson matches the supplied reference."""

    def __init__(self, reference: object) -> None:
        self.reference = reference
        super().__init__("Lesson not found")
