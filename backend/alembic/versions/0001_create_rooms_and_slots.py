"""create rooms and slots

Revision ID: 0001
Revises:
Create Date: 2026-10-16
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "rooms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("room_no", sa.Integer(), nullable=False),
        sa.Column("floor_no", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("capacity", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("price_per_slot", sa.Float(), nullable=False, server_default=sa.text("0")),
        sa.Column("amenities", sa.Text(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("is_active", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.UniqueConstraint("room_no"),
    )
    op.create_table(
        "slots",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("room_id", sa.Integer(), sa.ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False),
        sa.Column("date", sa.Text(), nullable=False),
        sa.Column("start_time", sa.Text(), nullable=False),
        sa.Column("end_time", sa.Text(), nullable=False),
        sa.Column("is_booked", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_deleted", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.Text(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.Text(), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )
    op.create_index("ix_slots_room_date", "slots", ["room_id", "date"])


def downgrade():
    op.drop_index("ix_slots_room_date", table_name="slots")
    op.drop_table("slots")
    op.drop_table("rooms")
