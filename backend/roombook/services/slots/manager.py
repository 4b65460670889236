# backend/roombook/services/slots/manager.py
"""
SlotManager: slot generation, availability listing, update and soft delete.

Slots are fixed-length (SlotsConfig.slot_minutes) intervals of one room
on one date. Overlap means two [start, end) intervals share any point.

Known limitations, kept as-is:
- Overlap check and creation are separate statements, two concurrent
  create_slots calls for the same room/date can both pass the check.
- A window that is not a whole number of slots loses its remainder
  (09:00-10:30 → one slot 09:00-10:00).
- update_slot re-checks conflicts only when both times are supplied.
"""

import logging
from datetime import date as date_type, datetime
from typing import Optional

from ...models.generated import Slots as DBSlots
from ...repositories import RoomRepository, SlotRepository
from ..events import SLOT_CREATED, SLOT_DELETED, SLOT_UPDATED, emit_event
from .config import SlotsConfig, get_slots_config, minutes_to_time_str, time_str_to_minutes
from .exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class SlotManager:
    """Creates, lists, updates and soft-deletes room slots."""

    def __init__(
        self,
        rooms: RoomRepository,
        slots: SlotRepository,
        config: SlotsConfig | None = None,
    ):
        self.rooms = rooms
        self.slots = slots
        self.config = config or get_slots_config()

    # ── Create ───────────────────────────────────────────────────────────

    def create_slots(
        self,
        room_id: int,
        target_date: date_type | str,
        start_time: str,
        end_time: str,
    ) -> list[DBSlots]:
        """
        Split [start_time, end_time) into consecutive slots and persist them.

        Raises:
            ValidationError: malformed input or end_time <= start_time
            NotFoundError: room does not exist
            ConflictError: a non-deleted slot overlaps the window
        """
        date_str = _date_str(target_date)
        start_min = time_str_to_minutes(start_time)
        end_min = time_str_to_minutes(end_time)
        total_duration = end_min - start_min

        logger.debug(
            f"Creating slots for room={room_id} date={date_str} "
            f"{start_time}-{end_time} (minutes {start_min}-{end_min}, duration {total_duration})"
        )

        if total_duration <= 0:
            raise ValidationError("End time must be after start time")

        if not self.rooms.find_by_id(room_id):
            raise NotFoundError("Room is not found")

        overlapping = self.slots.find(
            room_id=room_id,
            date=date_str,
            is_deleted=False,
            starts_before=end_time,
            ends_after=start_time,
        )
        if overlapping:
            raise ConflictError("A slot already exists for this time range")

        step = self.config.slot_minutes
        created = []
        for i in range(self.config.slots_in(total_duration)):
            slot = self.slots.create(
                room_id=room_id,
                date=date_str,
                start_time=minutes_to_time_str(start_min + i * step),
                end_time=minutes_to_time_str(start_min + (i + 1) * step),
            )
            created.append(slot)

        logger.info(f"Created {len(created)} slot(s) for room={room_id} date={date_str}")

        if created:
            emit_event(SLOT_CREATED, {
                "slot_ids": [s.id for s in created],
                "room_id": room_id,
                "date": date_str,
            })
        return created

    # ── Read ─────────────────────────────────────────────────────────────

    def list_available(
        self,
        target_date: date_type | str | None = None,
        room_id: int | None = None,
    ) -> list[DBSlots]:
        """Free, non-deleted slots with their room loaded."""
        return self.slots.find(
            room_id=room_id,
            date=_date_str(target_date) if target_date else None,
            is_booked=False,
            is_deleted=False,
            populate_room=True,
        )

    # ── Update ───────────────────────────────────────────────────────────

    def update_slot(
        self,
        slot_id: int,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
    ) -> DBSlots:
        """
        Change the time window of a free slot.

        Conflicts are checked only when both start_time and end_time
        are given; a single-field patch is written as is.
        """
        existing = self.slots.find_by_id(slot_id)
        if not existing:
            raise NotFoundError("Slot not found")

        if existing.is_booked:
            raise ConflictError("Cannot update a booked slot")

        fields = {}
        minutes = {}
        for field, value in (("start_time", start_time), ("end_time", end_time)):
            if value is not None:
                minutes[field] = time_str_to_minutes(value)
                fields[field] = value

        if len(fields) == 2:
            if minutes["end_time"] <= minutes["start_time"]:
                raise ValidationError("End time must be after start time")

            conflicting = self.slots.find_conflicting(
                room_id=existing.room_id,
                date=existing.date,
                start_time=start_time,
                end_time=end_time,
                exclude_id=slot_id,
            )
            if conflicting:
                raise ConflictError("Time conflict with another slot")

        updated = self.slots.find_one_and_update(slot_id, fields)
        if fields:
            emit_event(SLOT_UPDATED, {
                "slot_ids": [slot_id],
                "room_id": updated.room_id,
                "date": updated.date,
            })
        return updated

    # ── Delete ───────────────────────────────────────────────────────────

    def delete_slot(self, slot_id: int) -> DBSlots:
        """Soft delete: set is_deleted, keep the row."""
        existing = self.slots.find_by_id(slot_id)
        if not existing:
            raise NotFoundError("Slot not found")

        if existing.is_deleted:
            raise ConflictError("Slot is already deleted")

        updated = self.slots.find_by_id_and_update(slot_id, {"is_deleted": 1})
        logger.info(f"Slot {slot_id} deleted")

        emit_event(SLOT_DELETED, {
            "slot_ids": [slot_id],
            "room_id": updated.room_id,
            "date": updated.date,
        })
        return updated


# ── Helpers ──────────────────────────────────────────────────────────────


def _date_str(value: date_type | str) -> str:
    """Normalize a date, datetime or "YYYY-MM-DD" string to "YYYY-MM-DD"."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date_type):
        return value.isoformat()
    try:
        return date_type.fromisoformat(value).isoformat()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}, expected YYYY-MM-DD")
