from .rooms import RoomRepository
from .slots import SlotRepository

__all__ = [
    "RoomRepository",
    "SlotRepository",
]
