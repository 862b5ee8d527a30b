"""Default provider that only knows UTC."""

from __future__ import annotations

from datetime import datetime

from ..exceptions import UnknownTimezoneError
from ..models import UTC_PERIOD, UTC_ZONE, TimezonePeriod
from .base import TimezoneProvider

UTC_NAMES = frozenset({UTC_ZONE, "UTC"})


class UTCOnlyProvider(TimezoneProvider):
    """Provider used when nothing else is configured.

    Keeps the zone-unaware behavior: UTC resolves, every other zone name is
    reported as unknown.
    """

    name = "utc"

    def _check(self, time_zone: str) -> None:
        if time_zone not in UTC_NAMES:
            raise UnknownTimezoneError(
                time_zone,
                f"Unknown time zone: {time_zone!r}. Only UTC is available without a "
                "timezone provider; set `timezone_provider` (e.g. \"zoneinfo\") under "
                "[tool.zonedtime] in pyproject.toml or ZONEDTIME_TIMEZONE_PROVIDER.",
            )

    def period_for_utc(self, time_zone: str, utc: datetime) -> TimezonePeriod:
        self._check(time_zone)
        return UTC_PERIOD

    def periods_for_wall(self, time_zone: str, wall: datetime) -> tuple[TimezonePeriod, ...]:
        self._check(time_zone)
        return (UTC_PERIOD,)

    def available_zones(self) -> frozenset[str]:
        return UTC_NAMES
