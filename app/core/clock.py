import time
from datetime import datetime, timezone


def now_millis() -> int:
    """Current time as epoch milliseconds, the unit of `completedAt`."""
    return int(time.time() * 1000)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
