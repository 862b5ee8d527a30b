"""Timezone provider contract.

A provider maps zone names and instants to offsets. zonedtime never ships a
zone database itself; every concrete provider wraps an existing one.
"""

from __future__ import annotations

import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone, tzinfo
from typing import ClassVar, Optional

from ..exceptions import UnknownTimezoneError, UnresolvableTimeError
from ..models import TimezonePeriod

logger = logging.getLogger(__name__)


def order_periods(periods: Iterable[TimezonePeriod]) -> tuple[TimezonePeriod, ...]:
    """Deduplicate wall-time candidates and order them earliest instant first.

    For a fixed wall time a larger offset means an earlier instant.
    """
    unique = {period.utc_offset: period for period in periods}
    return tuple(sorted(unique.values(), key=lambda p: p.utc_offset, reverse=True))


class TimezoneProvider(ABC):
    """Base class for timezone providers.

    Subclasses implement ``period_for_utc`` and ``periods_for_wall``. The
    tie-breaking rule for ambiguous wall times lives in ``choose_ambiguous``
    and may be overridden.
    """

    name: ClassVar[str] = "abstract"

    @abstractmethod
    def period_for_utc(self, time_zone: str, utc: datetime) -> TimezonePeriod:
        """Return the period in effect at a UTC instant.

        Args:
            time_zone: Zone name
            utc: Naive datetime interpreted as UTC

        Raises:
            UnknownTimezoneError: If the zone is not known
        """

    @abstractmethod
    def periods_for_wall(self, time_zone: str, wall: datetime) -> tuple[TimezonePeriod, ...]:
        """Return every period under which ``wall`` is a valid local time.

        An empty tuple means ``wall`` falls in a gap; two periods mean it is
        ambiguous, ordered earliest instant first.

        Raises:
            UnknownTimezoneError: If the zone is not known
        """

    @abstractmethod
    def available_zones(self) -> frozenset[str]:
        """Return the zone names this provider can resolve."""

    def is_known(self, time_zone: str) -> bool:
        """Check whether the provider recognizes ``time_zone``."""
        try:
            self.period_for_utc(time_zone, datetime(2000, 1, 1))
        except UnknownTimezoneError:
            return False
        return True

    def resolve_wall(self, time_zone: str, wall: datetime) -> TimezonePeriod:
        """Pick the single period for a wall time.

        Raises:
            UnknownTimezoneError: If the zone is not known
            UnresolvableTimeError: If ``wall`` falls in a gap
        """
        periods = self.periods_for_wall(time_zone, wall)
        if not periods:
            logger.debug("%s falls in a gap in %s", wall, time_zone)
            raise UnresolvableTimeError(time_zone, wall)
        if len(periods) == 1:
            return periods[0]
        logger.debug(
            "%s is ambiguous in %s (%s); applying %s tie-break",
            wall,
            time_zone,
            ", ".join(p.zone_abbr or str(p.utc_offset) for p in periods),
            self.name,
        )
        return self.choose_ambiguous(time_zone, wall, periods)

    def choose_ambiguous(
        self, time_zone: str, wall: datetime, periods: tuple[TimezonePeriod, ...]
    ) -> TimezonePeriod:
        """Tie-break for repeated wall times.

        Follows PEP 495: ``fold=0`` selects the earlier instant and
        ``fold=1`` the later one.
        """
        return periods[-1] if wall.fold else periods[0]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


class TzinfoProvider(TimezoneProvider):
    """Shared plumbing for providers backed by ``datetime.tzinfo`` objects.

    Handles name validation, per-instance zone caching and reading offsets
    back out of aware datetimes.
    """

    def __init__(self, cache_size: Optional[int] = 128) -> None:
        self._cached_zone = functools.lru_cache(maxsize=cache_size)(self._load_zone)

    @abstractmethod
    def _load_zone(self, time_zone: str) -> tzinfo:
        """Load the tzinfo for ``time_zone`` or raise ``UnknownTimezoneError``."""

    def zone(self, time_zone: str) -> tzinfo:
        """Return the (cached) tzinfo object for ``time_zone``."""
        if not isinstance(time_zone, str) or not time_zone.strip():
            raise UnknownTimezoneError(time_zone)
        return self._cached_zone(time_zone)

    @staticmethod
    def period_from_aware(aware: datetime) -> TimezonePeriod:
        utc_offset = aware.utcoffset() or timedelta(0)
        dst = aware.dst() or timedelta(0)
        return TimezonePeriod(
            utc_offset=utc_offset,
            std_offset=utc_offset - dst,
            zone_abbr=aware.tzname() or "",
        )

    def period_for_utc(self, time_zone: str, utc: datetime) -> TimezonePeriod:
        zone = self.zone(time_zone)
        return self.period_from_aware(utc.replace(tzinfo=timezone.utc).astimezone(zone))
