import logging

from fastapi import FastAPI
from redis.exceptions import RedisError

from .config import settings
from .errors import register_error_handlers
from .redis_client import redis_client
from .routers import slots

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Room Booking Slots API")

register_error_handlers(app)
app.include_router(slots.router)


@app.get("/health")
def health():
    try:
        redis_ok = bool(redis_client.ping())
    except RedisError as e:
        logger.warning(f"Redis ping failed: {e}")
        redis_ok = False
    return {"status": "ok", "redis": redis_ok}
