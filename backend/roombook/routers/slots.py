# backend/roombook/routers/slots.py
"""
Slots API endpoints.

POST   /slots/              - Generate hour slots for a room/date window
GET    /slots/availability  - Free slots, optionally by date and room
PATCH  /slots/{id}          - Change time window of a free slot
DELETE /slots/{id}          - Soft delete
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..repositories import RoomRepository, SlotRepository
from ..schemas.slots import (
    SlotCreate,
    SlotRead,
    SlotUpdate,
    SlotWithRoom,
)
from ..services.slots import SlotManager


router = APIRouter(prefix="/slots", tags=["slots"])


def get_slot_manager(db: Session = Depends(get_db)) -> SlotManager:
    return SlotManager(RoomRepository(db), SlotRepository(db))


@router.post("/", response_model=list[SlotRead], status_code=status.HTTP_201_CREATED)
def create_slots(
    data: SlotCreate,
    manager: SlotManager = Depends(get_slot_manager),
):
    return manager.create_slots(
        room_id=data.room,
        target_date=data.date,
        start_time=data.start_time,
        end_time=data.end_time,
    )


@router.get("/availability", response_model=list[SlotWithRoom])
def list_available_slots(
    target_date: str | None = Query(None, alias="date", description="YYYY-MM-DD, empty = any"),
    room_id: int | None = Query(None, alias="roomId"),
    manager: SlotManager = Depends(get_slot_manager),
):
    # Empty ?date= means no date filter; malformed dates fail with ValidationError
    return manager.list_available(target_date=target_date, room_id=room_id)


@router.patch("/{id}", response_model=SlotRead)
def update_slot(
    id: int,
    data: SlotUpdate,
    manager: SlotManager = Depends(get_slot_manager),
):
    patch = data.model_dump(exclude_unset=True)
    return manager.update_slot(
        id,
        start_time=patch.get("start_time"),
        end_time=patch.get("end_time"),
    )


@router.delete("/{id}", response_model=SlotRead)
def delete_slot(id: int, manager: SlotManager = Depends(get_slot_manager)):
    return manager.delete_slot(id)
