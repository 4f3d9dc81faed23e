"""
Date utility functions
"""
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC now, matching the naive DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso8601_utc(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC timestamp with a trailing Z

    Args:
        moment: naive UTC or aware datetime (defaults to now)

    Returns:
        str: e.g. "2025-09-20T12:00:00Z"
    """
    if moment is None:
        moment = utcnow()
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment.replace(microsecond=0).isoformat() + "Z"


def is_future(moment: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """True when moment is set and later than now"""
    if moment is None:
        return False
    return moment > (now or utcnow())
