# backend/roombook/repositories/slots.py
"""
Slot persistence.

Times are stored as zero-padded "HH:MM" text, so string comparison
orders them the same way as minutes since midnight and range filters
run directly on the columns.
"""

from typing import Optional

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session, joinedload

from ..models.generated import Slots as DBSlots

UPDATABLE_FIELDS = {"start_time", "end_time", "is_booked", "is_deleted"}


class SlotRepository:
    """Query/create/update operations on the slots table."""

    def __init__(self, db: Session):
        self.db = db

    # ── Read ─────────────────────────────────────────────────────────────

    def find(
        self,
        *,
        room_id: int | None = None,
        date: str | None = None,
        is_booked: bool | None = None,
        is_deleted: bool | None = None,
        exclude_id: int | None = None,
        starts_before: str | None = None,
        ends_after: str | None = None,
        populate_room: bool = False,
    ) -> list[DBSlots]:
        """
        Find slots matching all given criteria.

        Args:
            room_id, date: equality filters
            is_booked, is_deleted: flag filters
            exclude_id: skip this slot id
            starts_before: start_time < value
            ends_after: end_time > value
            populate_room: load the room relationship in the same query
        """
        query = self.db.query(DBSlots)

        if populate_room:
            query = query.options(joinedload(DBSlots.room))
        if room_id is not None:
            query = query.filter(DBSlots.room_id == room_id)
        if date is not None:
            query = query.filter(DBSlots.date == date)
        if is_booked is not None:
            query = query.filter(DBSlots.is_booked == int(is_booked))
        if is_deleted is not None:
            query = query.filter(DBSlots.is_deleted == int(is_deleted))
        if exclude_id is not None:
            query = query.filter(DBSlots.id != exclude_id)
        if starts_before is not None:
            query = query.filter(DBSlots.start_time < starts_before)
        if ends_after is not None:
            query = query.filter(DBSlots.end_time > ends_after)

        return (
            query
            .order_by(DBSlots.date, DBSlots.start_time, DBSlots.room_id)
            .all()
        )

    def find_conflicting(
        self,
        room_id: int,
        date: str,
        start_time: str,
        end_time: str,
        exclude_id: int | None = None,
    ) -> list[DBSlots]:
        """
        Non-deleted slots of room/date colliding with [start_time, end_time).

        A slot collides when:
          - its start falls in [start_time, end_time), or
          - its end falls in (start_time, end_time], or
          - it covers [start_time, end_time] entirely.
        """
        query = self.db.query(DBSlots).filter(
            DBSlots.room_id == room_id,
            DBSlots.date == date,
            DBSlots.is_deleted == 0,
            or_(
                and_(DBSlots.start_time < end_time, DBSlots.start_time >= start_time),
                and_(DBSlots.end_time > start_time, DBSlots.end_time <= end_time),
                and_(DBSlots.start_time <= start_time, DBSlots.end_time >= end_time),
            ),
        )
        if exclude_id is not None:
            query = query.filter(DBSlots.id != exclude_id)
        return query.all()

    def find_by_id(self, slot_id: int) -> Optional[DBSlots]:
        return self.db.get(DBSlots, slot_id)

    # ── Write ────────────────────────────────────────────────────────────

    def create(self, **fields) -> DBSlots:
        """Persist a single new slot."""
        obj = DBSlots(**fields)
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def find_one_and_update(self, slot_id: int, fields: dict) -> Optional[DBSlots]:
        """Partial update; returns the post-update record or None."""
        obj = self.db.get(DBSlots, slot_id)
        if not obj:
            return None

        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields not updatable: {sorted(unknown)}")

        if fields:
            for field, value in fields.items():
                setattr(obj, field, value)
            obj.updated_at = func.current_timestamp()
            self.db.commit()
            self.db.refresh(obj)
        return obj

    def find_by_id_and_update(self, slot_id: int, fields: dict) -> Optional[DBSlots]:
        """Same as find_one_and_update; used for flag flips."""
        return self.find_one_and_update(slot_id, fields)
