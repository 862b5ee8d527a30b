"""Provider backed by ``pytz``."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

import pytz

from ..exceptions import UnknownTimezoneError
from ..models import TimezonePeriod
from .base import TzinfoProvider, order_periods

logger = logging.getLogger(__name__)


class PytzProvider(TzinfoProvider):
    """Resolve zones with ``pytz.timezone``.

    pytz reports gaps and overlaps itself through ``localize(is_dst=None)``,
    which is used here to classify wall times.
    """

    name = "pytz"

    def _load_zone(self, time_zone: str) -> tzinfo:
        try:
            return pytz.timezone(time_zone)
        except (pytz.UnknownTimeZoneError, ValueError) as exc:
            raise UnknownTimezoneError(time_zone) from exc

    def periods_for_wall(self, time_zone: str, wall: datetime) -> tuple[TimezonePeriod, ...]:
        zone = self.zone(time_zone)
        naive = wall.replace(fold=0)
        try:
            return (self.period_from_aware(zone.localize(naive, is_dst=None)),)
        except pytz.NonExistentTimeError:
            return ()
        except pytz.AmbiguousTimeError:
            return order_periods(
                self.period_from_aware(zone.localize(naive, is_dst=flag)) for flag in (True, False)
            )

    def available_zones(self) -> frozenset[str]:
        return frozenset(pytz.all_timezones_set)
