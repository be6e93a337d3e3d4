"""
Model Utilities

Identifier and timestamp generators used as column defaults.
"""

import threading
import uuid
from datetime import datetime, timedelta, timezone

_timestamp_lock = threading.Lock()
_last_timestamp = None


def generate_todo_id():
    """Generate a random UUID string; ids are never reused"""
    return str(uuid.uuid4())


def generate_created_at():
    """Return a UTC ISO-8601 timestamp that is strictly greater than the previous one.

    The column is text, so values must sort lexically in creation order. The
    fixed-width format (always with microseconds) guarantees that, and bumping
    by one microsecond on a clock tie keeps two inserts from comparing equal.
    """
    global _last_timestamp
    with _timestamp_lock:
        now = datetime.now(timezone.utc)
        if _last_timestamp is not None and now <= _last_timestamp:
            now = _last_timestamp + timedelta(microseconds=1)
        _last_timestamp = now
    return now.strftime('%Y-%m-%dT%H:%M:%S.%fZ')
