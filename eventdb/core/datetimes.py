from datetime import datetime, timezone
from typing import Optional


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Event, schedule and sales times are stored as naive UTC. Aware values are
    shifted to UTC first; naive values are taken to be UTC already.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def naive_utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
