# backend/roombook/schemas/slots.py
"""
Pydantic schemas for slots API.
"""

import json
from datetime import date
from pydantic import BaseModel, Field, field_validator

TIME_PATTERN = r"^\d{2}:\d{2}$"


class RoomInline(BaseModel):
    """Room data embedded into slot responses."""
    id: int
    name: str
    room_no: int
    floor_no: int
    capacity: int
    price_per_slot: float
    amenities: list[str] = []

    model_config = {"from_attributes": True}

    @field_validator("amenities", mode="before")
    @classmethod
    def parse_amenities(cls, value):
        # Stored as JSON text
        if isinstance(value, str):
            return json.loads(value) if value else []
        return value


class SlotCreate(BaseModel):
    room: int
    date: date
    start_time: str = Field(pattern=TIME_PATTERN, description="HH:MM")
    end_time: str = Field(pattern=TIME_PATTERN, description="HH:MM")

    model_config = {"from_attributes": True}


class SlotUpdate(BaseModel):
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    end_time: str | None = Field(None, pattern=TIME_PATTERN)

    model_config = {"from_attributes": True}


class SlotRead(BaseModel):
    id: int
    room: int = Field(validation_alias="room_id")
    date: date
    start_time: str
    end_time: str
    is_booked: bool
    is_deleted: bool

    model_config = {"from_attributes": True}


class SlotWithRoom(BaseModel):
    """Slot with its room resolved (availability listing)."""
    id: int
    room: RoomInline
    date: date
    start_time: str
    end_time: str
    is_booked: bool
    is_deleted: bool

    model_config = {"from_attributes": True}
