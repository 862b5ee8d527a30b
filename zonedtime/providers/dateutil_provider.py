"""Provider backed by ``dateutil.tz``."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from dateutil import tz as dateutil_tz
from dateutil.zoneinfo import get_zonefile_instance

from ..exceptions import UnknownTimezoneError
from ..models import TimezonePeriod
from .base import TzinfoProvider, order_periods

logger = logging.getLogger(__name__)


class DateutilProvider(TzinfoProvider):
    """Resolve zones with ``dateutil.tz.gettz``.

    ``gettz`` returns None for names it cannot find; that is reported as an
    unknown zone. Gap and overlap detection use ``datetime_exists`` and
    ``datetime_ambiguous``.
    """

    name = "dateutil"

    def _load_zone(self, time_zone: str) -> tzinfo:
        try:
            zone = dateutil_tz.gettz(time_zone)
        except ValueError as exc:
            raise UnknownTimezoneError(time_zone) from exc
        # gettz falls back to POSIX TZ strings and the host's local zone;
        # only named zones are accepted.
        if zone is None or isinstance(zone, (dateutil_tz.tzstr, dateutil_tz.tzlocal)):
            raise UnknownTimezoneError(time_zone)
        return zone

    def periods_for_wall(self, time_zone: str, wall: datetime) -> tuple[TimezonePeriod, ...]:
        zone = self.zone(time_zone)
        local = wall.replace(tzinfo=zone, fold=0)
        if not dateutil_tz.datetime_exists(local):
            return ()
        if dateutil_tz.datetime_ambiguous(local):
            return order_periods(
                self.period_from_aware(dateutil_tz.enfold(local, fold=fold)) for fold in (0, 1)
            )
        return (self.period_from_aware(local),)

    def available_zones(self) -> frozenset[str]:
        return frozenset(get_zonefile_instance().zones)
