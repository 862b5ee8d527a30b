"""Data models for zoned timestamps."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

UTC_ZONE = "Etc/UTC"

_MAX_OFFSET = timedelta(hours=24)


def _check_offset(value: timedelta) -> timedelta:
    if not -_MAX_OFFSET < value < _MAX_OFFSET:
        raise ValueError(f"UTC offset must be strictly within 24 hours, got {value}")
    return value


class TimezonePeriod(BaseModel):
    """Offsets in effect for a span of time in one zone.

    ``utc_offset`` is the total offset actually in effect, including any
    daylight-saving adjustment. ``std_offset`` is the zone's standard
    (non-daylight-saving) offset for the same span.
    """

    utc_offset: timedelta = Field(..., description="Current UTC offset")
    std_offset: timedelta = Field(..., description="Standard UTC offset")
    zone_abbr: str = Field(default="", description="Zone abbreviation, e.g. AEDT")

    model_config = ConfigDict(frozen=True)

    @field_validator("utc_offset", "std_offset")
    @classmethod
    def _offset_in_range(cls, value: timedelta) -> timedelta:
        return _check_offset(value)

    @property
    def dst_offset(self) -> timedelta:
        """Daylight-saving adjustment on top of the standard offset."""
        return self.utc_offset - self.std_offset

    @property
    def is_dst(self) -> bool:
        return self.dst_offset != timedelta(0)


UTC_PERIOD = TimezonePeriod(utc_offset=timedelta(0), std_offset=timedelta(0), zone_abbr="UTC")


class ZonedDateTime(BaseModel):
    """A wall-clock time bound to a named time zone.

    The wall time is always naive; the zone identity and the offsets that
    were resolved for it travel alongside. Ordering compares instants, while
    ``==`` compares fields, so the same instant expressed in two zones is
    ordered equal but not ``==``. Use ``same_instant()`` for that check.
    """

    wall: datetime = Field(..., description="Naive local wall-clock time")
    time_zone: str = Field(..., description="Zone name, e.g. Australia/Sydney")
    zone_abbr: str = Field(default="", description="Zone abbreviation in effect")
    utc_offset: timedelta = Field(..., description="Current UTC offset")
    std_offset: timedelta = Field(..., description="Standard UTC offset")

    model_config = ConfigDict(frozen=True)

    @field_validator("wall")
    @classmethod
    def _wall_must_be_naive(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("wall time must be a naive datetime")
        return value

    @field_validator("utc_offset", "std_offset")
    @classmethod
    def _offset_in_range(cls, value: timedelta) -> timedelta:
        return _check_offset(value)

    @field_serializer("utc_offset", "std_offset")
    def _serialize_offset(self, value: timedelta) -> int:
        return int(value.total_seconds())

    @classmethod
    def from_period(cls, wall: datetime, time_zone: str, period: TimezonePeriod) -> ZonedDateTime:
        """Bind a naive wall time to a zone using an already resolved period."""
        return cls(
            wall=wall.replace(fold=0),
            time_zone=time_zone,
            zone_abbr=period.zone_abbr,
            utc_offset=period.utc_offset,
            std_offset=period.std_offset,
        )

    # Calendar fields

    @property
    def year(self) -> int:
        return self.wall.year

    @property
    def month(self) -> int:
        return self.wall.month

    @property
    def day(self) -> int:
        return self.wall.day

    @property
    def hour(self) -> int:
        return self.wall.hour

    @property
    def minute(self) -> int:
        return self.wall.minute

    @property
    def second(self) -> int:
        return self.wall.second

    @property
    def microsecond(self) -> int:
        return self.wall.microsecond

    @property
    def dst_offset(self) -> timedelta:
        return self.utc_offset - self.std_offset

    @property
    def period(self) -> TimezonePeriod:
        return TimezonePeriod(
            utc_offset=self.utc_offset, std_offset=self.std_offset, zone_abbr=self.zone_abbr
        )

    # Conversions

    def to_naive(self) -> datetime:
        """Return the local wall-clock time without zone information."""
        return self.wall

    def to_utc_naive(self) -> datetime:
        """Return the instant as a naive UTC datetime."""
        return self.wall - self.utc_offset

    def to_datetime(self) -> datetime:
        """Return a stdlib aware datetime with a fixed offset tzinfo.

        The zone name is not preserved, only the offset and abbreviation.
        """
        tz = timezone(self.utc_offset, self.zone_abbr) if self.zone_abbr else timezone(self.utc_offset)
        return self.wall.replace(tzinfo=tz)

    def timestamp(self) -> float:
        """POSIX timestamp of the instant."""
        return self.to_datetime().timestamp()

    def isoformat(self, sep: str = "T", timespec: str = "auto") -> str:
        return self.to_datetime().isoformat(sep=sep, timespec=timespec)

    def __str__(self) -> str:
        parts = (self.isoformat(sep=" "), self.zone_abbr, self.time_zone)
        return " ".join(part for part in parts if part)

    # Instant comparison

    def compare(self, other: ZonedDateTime) -> int:
        """Compare instants: -1 if earlier, 0 if the same instant, 1 if later."""
        mine, theirs = self.to_utc_naive(), other.to_utc_naive()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def same_instant(self, other: ZonedDateTime) -> bool:
        return self.compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self.compare(other) >= 0
