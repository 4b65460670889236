from .generated import Base, Rooms, Slots, metadata

__all__ = [
    "Base",
    "metadata",
    "Rooms",
    "Slots",
]
