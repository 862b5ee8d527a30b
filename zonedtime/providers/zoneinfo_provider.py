"""Provider backed by the standard library ``zoneinfo`` module.

Zone data comes from the system tz database, falling back to the ``tzdata``
package when the host has none.
"""

from __future__ import annotations

import logging
import zoneinfo
from datetime import datetime, timezone, tzinfo
from typing import Optional

from ..exceptions import UnknownTimezoneError
from ..models import TimezonePeriod
from .base import TzinfoProvider, order_periods

logger = logging.getLogger(__name__)


class ZoneInfoProvider(TzinfoProvider):
    """Resolve zones with ``zoneinfo.ZoneInfo``.

    Args:
        cache_size: Number of zones kept by this provider (None for unbounded)
        nocache: Bypass ZoneInfo's global cache and always re-read zone files
    """

    name = "zoneinfo"

    def __init__(self, cache_size: Optional[int] = 128, nocache: bool = False) -> None:
        super().__init__(cache_size=cache_size)
        self.nocache = nocache

    def _load_zone(self, time_zone: str) -> tzinfo:
        try:
            if self.nocache:
                return zoneinfo.ZoneInfo.no_cache(time_zone)
            return zoneinfo.ZoneInfo(time_zone)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise UnknownTimezoneError(time_zone) from exc

    def periods_for_wall(self, time_zone: str, wall: datetime) -> tuple[TimezonePeriod, ...]:
        zone = self.zone(time_zone)
        candidates = []
        # A candidate is valid only if it survives a round trip through UTC.
        for fold in (0, 1):
            local = wall.replace(tzinfo=zone, fold=fold)
            back = local.astimezone(timezone.utc).astimezone(zone).replace(tzinfo=None)
            if back == wall.replace(fold=0):
                candidates.append(self.period_from_aware(local))
        return order_periods(candidates)

    def available_zones(self) -> frozenset[str]:
        return frozenset(zoneinfo.available_timezones())
