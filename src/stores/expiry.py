"""Credential expiry arithmetic."""

import logging
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateutil_parser
from dateutil import tz
from dateutil.parser import ParserError
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def _as_local(value: datetime) -> datetime:
    # Naive values are local wall-clock time; the zone stays DST-aware
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.tzlocal())
    return value.astimezone(tz.tzlocal())


def parse_login_time(last_login_time: Optional[str]) -> Optional[datetime]:
    """Parse a backend login timestamp, returning None when absent or unreadable."""
    if not last_login_time:
        return None
    try:
        return dateutil_parser.parse(last_login_time)
    except (ParserError, ValueError, OverflowError):
        logger.warning(f"Unreadable last login time: {last_login_time!r}")
        return None


def compute_expiry(last_login_time: Optional[str], months: int = 1) -> Optional[datetime]:
    """Expiry instant: the login time plus whole calendar months.

    relativedelta keeps the day of month and clamps it to the length of the
    target month (Jan 31 + 1 month is Feb 28 or 29).
    """
    logged_in_at = parse_login_time(last_login_time)
    if logged_in_at is None:
        return None
    return _as_local(logged_in_at) + relativedelta(months=months)


def days_until_expiry(
    last_login_time: Optional[str],
    now: Optional[datetime] = None,
    months: int = 1,
) -> Optional[int]:
    """Signed whole days from ``now`` until expiry, truncated toward zero.

    Negative once expired, None when no login has been recorded.
    """
    expires_at = compute_expiry(last_login_time, months=months)
    if expires_at is None:
        return None

    current = _as_local(now if now is not None else datetime.now())
    remaining = (expires_at.astimezone(timezone.utc) - current.astimezone(timezone.utc)).total_seconds()
    return int(remaining / SECONDS_PER_DAY)
