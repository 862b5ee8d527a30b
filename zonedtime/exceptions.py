"""Exception hierarchy for zonedtime.

Timezone resolution can only fail in two ways: the zone name is not known to
the provider, or the local time cannot be placed in the zone (for example it
falls inside a daylight-saving gap). Both are represented by subclasses of
``TimezoneError`` tagged with a ``TimezoneErrorReason``.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional


class TimezoneErrorReason(str, Enum):
    """The two ways a timezone resolution can fail."""

    TIME_ZONE_NOT_FOUND = "time_zone_not_found"
    TIME_UNRESOLVABLE = "time_unresolvable"


class ZonedTimeError(Exception):
    """Base exception for all zonedtime errors."""


class TimezoneError(ZonedTimeError):
    """A zone name or local time could not be resolved by the provider.

    Attributes:
        reason: Which of the two failure modes occurred
        time_zone: Zone name that was requested
    """

    reason: TimezoneErrorReason

    def __init__(self, message: str, time_zone: Optional[str] = None) -> None:
        super().__init__(message)
        self.time_zone = time_zone


class UnknownTimezoneError(TimezoneError):
    """Zone name is not recognized by the active provider.

    Raised when:
    - The name is empty or malformed
    - The provider's database has no zone with that name
    - The UTC-only default provider is asked for anything but UTC
    """

    reason = TimezoneErrorReason.TIME_ZONE_NOT_FOUND

    def __init__(self, time_zone: Optional[str], message: Optional[str] = None) -> None:
        super().__init__(message or f"Unknown time zone: {time_zone!r}", time_zone)


class UnresolvableTimeError(TimezoneError):
    """Wall-clock time does not exist in the named zone.

    Typically the time falls inside a spring-forward gap, e.g. 02:30 in
    America/New_York on 2025-03-09.
    """

    reason = TimezoneErrorReason.TIME_UNRESOLVABLE

    def __init__(self, time_zone: str, wall: datetime, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"{wall.isoformat()} cannot be resolved in time zone {time_zone!r}",
            time_zone,
        )
        self.wall = wall


class ProviderConfigurationError(ZonedTimeError):
    """The configured timezone provider cannot be found, imported or built."""
