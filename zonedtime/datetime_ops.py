"""Zone-aware operations on timestamps.

``from_naive`` and ``to_timezone`` are the two core conversions; the rest
are conveniences built on the same provider calls. UTC is always resolved
locally, without consulting the provider.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import UTC_PERIOD, UTC_ZONE, ZonedDateTime
from .providers.base import TimezoneProvider
from .registry import get_provider

logger = logging.getLogger(__name__)


def _require_naive(value: datetime, name: str) -> None:
    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime object for {name}, got {type(value)}")
    if value.tzinfo is not None:
        raise TypeError(f"{name} must be a naive datetime, got tzinfo={value.tzinfo!r}")


def _provider(provider: Optional[TimezoneProvider]) -> TimezoneProvider:
    return provider if provider is not None else get_provider()


def from_naive(
    naive: datetime, time_zone: str, provider: Optional[TimezoneProvider] = None
) -> ZonedDateTime:
    """Bind a naive wall-clock time to a named zone.

    Args:
        naive: Local wall-clock time without tzinfo. Its ``fold`` attribute
            picks the occurrence of a repeated wall time under the default
            tie-break.
        time_zone: Zone name, e.g. "Australia/Sydney"
        provider: Provider to use instead of the configured one

    Returns:
        ZonedDateTime carrying the wall time, zone and resolved offsets

    Raises:
        TypeError: If ``naive`` is not a naive datetime
        UnknownTimezoneError: If the zone is not known to the provider
        UnresolvableTimeError: If the wall time does not exist in the zone

    Examples:
        >>> from_naive(datetime(2018, 1, 1, 10), "Australia/Sydney", ZoneInfoProvider())
        ZonedDateTime(wall=datetime.datetime(2018, 1, 1, 10, 0), time_zone='Australia/Sydney', ...)
    """
    _require_naive(naive, "naive")
    if time_zone == UTC_ZONE:
        return ZonedDateTime.from_period(naive, UTC_ZONE, UTC_PERIOD)

    period = _provider(provider).resolve_wall(time_zone, naive)
    return ZonedDateTime.from_period(naive, time_zone, period)


def from_utc(
    utc: datetime, time_zone: str, provider: Optional[TimezoneProvider] = None
) -> ZonedDateTime:
    """Express a UTC instant in a named zone.

    ``utc`` may be naive (taken as UTC) or aware (converted to UTC first).

    Raises:
        UnknownTimezoneError: If the zone is not known to the provider
    """
    if not isinstance(utc, datetime):
        raise TypeError(f"Expected datetime object, got {type(utc)}")
    if utc.tzinfo is not None:
        utc = utc.astimezone(timezone.utc).replace(tzinfo=None)

    if time_zone == UTC_ZONE:
        return ZonedDateTime.from_period(utc, UTC_ZONE, UTC_PERIOD)

    period = _provider(provider).period_for_utc(time_zone, utc)
    return ZonedDateTime.from_period(utc + period.utc_offset, time_zone, period)


def to_timezone(
    zoned: ZonedDateTime, time_zone: str, provider: Optional[TimezoneProvider] = None
) -> ZonedDateTime:
    """Convert a zoned timestamp to another zone, keeping the same instant.

    Raises:
        UnknownTimezoneError: If the target zone is not known to the provider
    """
    if not isinstance(zoned, ZonedDateTime):
        raise TypeError(f"Expected ZonedDateTime, got {type(zoned)}")
    if zoned.time_zone == time_zone:
        return zoned
    return from_utc(zoned.to_utc_naive(), time_zone, provider)


def from_datetime(
    aware: datetime, time_zone: str, provider: Optional[TimezoneProvider] = None
) -> ZonedDateTime:
    """Convert a stdlib aware datetime to a ZonedDateTime in ``time_zone``."""
    if not isinstance(aware, datetime):
        raise TypeError(f"Expected datetime object, got {type(aware)}")
    if aware.tzinfo is None or aware.utcoffset() is None:
        raise TypeError("from_datetime requires a timezone-aware datetime; use from_naive")
    return from_utc(aware, time_zone, provider)


def now(time_zone: str = UTC_ZONE, provider: Optional[TimezoneProvider] = None) -> ZonedDateTime:
    """Current time in ``time_zone``."""
    return from_utc(datetime.now(timezone.utc), time_zone, provider)


def add(
    zoned: ZonedDateTime, delta: timedelta, provider: Optional[TimezoneProvider] = None
) -> ZonedDateTime:
    """Move a zoned timestamp by elapsed time.

    The arithmetic happens on the instant and the result is re-resolved in
    the same zone, so crossing a DST transition adjusts the offset.
    """
    return from_utc(zoned.to_utc_naive() + delta, zoned.time_zone, provider)
