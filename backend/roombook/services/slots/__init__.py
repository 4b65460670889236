# backend/roombook/services/slots/__init__.py
"""
Slot management module.

SlotManager generates hour slots for a room/date, lists free slots,
updates time windows with conflict checks and soft-deletes slots.
"""

from .config import SlotsConfig, get_slots_config
from .exceptions import ConflictError, NotFoundError, SlotError, ValidationError
from .manager import SlotManager

__all__ = [
    "SlotsConfig",
    "get_slots_config",
    "SlotError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "SlotManager",
]
