# backend/roombook/services/slots/config.py
"""
Slot generation configuration and "HH:MM" helpers.

Slots are one hour long. slot_minutes (SLOT_MINUTES in the environment)
exists for deployments that deliberately want a finer grid; any value
other than 60 changes create_slots output away from hourly slots and
should not be set for the standard room-booking API.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from ...config import settings
from .exceptions import ValidationError


TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")


@dataclass(frozen=True)
class SlotsConfig:
    """
    Configuration for slot generation.

    Attributes:
        slot_minutes: Length of each generated slot (15/30/60)
    """
    slot_minutes: int = 60

    def __post_init__(self):
        if self.slot_minutes not in (15, 30, 60):
            raise ValueError(f"slot_minutes must be 15, 30, or 60, got {self.slot_minutes}")

    def slots_in(self, duration_minutes: int) -> int:
        """Number of whole slots that fit into duration (remainder dropped)."""
        return duration_minutes // self.slot_minutes


@lru_cache
def get_slots_config() -> SlotsConfig:
    """Get slots configuration (singleton)."""
    return SlotsConfig(slot_minutes=settings.slot_minutes)


def time_str_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    match = TIME_RE.match(value or "")
    if not match:
        raise ValidationError(f"Invalid time format: {value!r}, expected HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValidationError(f"Invalid time: {value!r}")
    return hour * 60 + minute


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes since midnight to "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
