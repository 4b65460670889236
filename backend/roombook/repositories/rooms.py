# backend/roombook/repositories/rooms.py

from typing import Optional

from sqlalchemy.orm import Session

from ..models.generated import Rooms as DBRooms


class RoomRepository:
    """Read-only access to rooms; existence checks only."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, room_id: int) -> Optional[DBRooms]:
        """Get active room by ID. Archived rooms count as absent."""
        obj = self.db.get(DBRooms, room_id)
        if not obj or not obj.is_active:
            return None
        return obj
