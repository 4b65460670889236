from sqlalchemy import Column, Float, ForeignKey, Index, Integer, Text, UniqueConstraint, text

from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


class Rooms(Base):
    __tablename__ = 'rooms'
    __table_args__ = (
        UniqueConstraint('room_no'),
    )

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    room_no = Column(Integer, nullable=False)
    floor_no = Column(Integer, nullable=False, server_default=text('1'))
    capacity = Column(Integer, nullable=False, server_default=text('1'))
    price_per_slot = Column(Float, nullable=False, server_default=text('0'))
    amenities = Column(Text, nullable=False, server_default=text("'[]'"))
    is_active = Column(Integer, nullable=False, server_default=text('1'))

    slots = relationship('Slots', back_populates='room')


class Slots(Base):
    __tablename__ = 'slots'
    __table_args__ = (
        Index('ix_slots_room_date', 'room_id', 'date'),
    )

    id = Column(Integer, primary_key=True)
    room_id = Column(ForeignKey('rooms.id', ondelete='CASCADE'), nullable=False)
    date = Column(Text, nullable=False)  # YYYY-MM-DD
    start_time = Column(Text, nullable=False)  # HH:MM
    end_time = Column(Text, nullable=False)  # HH:MM
    is_booked = Column(Integer, nullable=False, server_default=text('0'))
    is_deleted = Column(Integer, nullable=False, server_default=text('0'))
    created_at = Column(Text, nullable=False, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, nullable=False, server_default=text('CURRENT_TIMESTAMP'))

    room = relationship('Rooms', back_populates='slots')
