"""
backend/roombook/services/events.py

Event emitter: pushes slot lifecycle events to Redis for consumers
outside this service (booking component, notifications).

Queue: events:p2p (Redis list, RPUSH / BLPOP).
"""

import json
import time
import logging

from ..config import settings
from ..redis_client import redis_client

logger = logging.getLogger(__name__)

SLOT_CREATED = "slot.created"
SLOT_UPDATED = "slot.updated"
SLOT_DELETED = "slot.deleted"


def emit_event(event_type: str, payload: dict) -> None:
    """
    Emit a p2p event.

    Delivery is best effort: a Redis failure is logged and swallowed,
    the slot operation that triggered it has already been committed.
    """
    if not settings.events_enabled:
        return

    event = {
        "type": event_type,
        **payload,
        "ts": int(time.time()),
    }
    try:
        redis_client.rpush("events:p2p", json.dumps(event))
        logger.info(f"Event emitted: {event_type} → events:p2p")
    except Exception as e:
        logger.error(f"Failed to emit event {event_type}: {e}")
