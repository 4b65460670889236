# backend/roombook/services/slots/exceptions.py
"""
Errors raised by SlotManager.

Each carries a machine-readable kind and the HTTP status the API layer
maps it to. Nothing is retried internally.
"""


class SlotError(Exception):
    """Base class for slot management errors."""

    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SlotError):
    """Malformed time or non-positive duration."""

    kind = "validation"
    status_code = 400


class NotFoundError(SlotError):
    """Room or slot does not exist."""

    kind = "not_found"
    status_code = 404


class ConflictError(SlotError):
    """Overlapping window, booked slot update, or repeated delete."""

    kind = "conflict"
    status_code = 409
