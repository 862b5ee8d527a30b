"""Unit tests for zonedtime.datetime_ops."""

from datetime import datetime, timedelta, timezone

import pytest

from zonedtime import registry
from zonedtime.datetime_ops import add, from_datetime, from_naive, from_utc, now, to_timezone
from zonedtime.exceptions import (
    TimezoneErrorReason,
    UnknownTimezoneError,
    UnresolvableTimeError,
)
from zonedtime.models import ZonedDateTime
from zonedtime.providers.base import TimezoneProvider

pytestmark = pytest.mark.unit

HOUR = timedelta(hours=1)


@pytest.fixture
def sydney(zoneinfo_provider) -> ZonedDateTime:
    return from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney", zoneinfo_provider)


class TestFromNaive:
    """Tests for from_naive."""

    def test_sydney_new_year(self, tz_provider: TimezoneProvider):
        """Sydney on New Year's morning is AEDT."""
        zoned = from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney", tz_provider)

        assert zoned.wall == datetime(2018, 1, 1, 10, 0)
        assert zoned.time_zone == "Australia/Sydney"
        assert zoned.zone_abbr == "AEDT"
        assert zoned.utc_offset == 11 * HOUR
        assert zoned.std_offset == 10 * HOUR
        assert zoned.to_utc_naive() == datetime(2017, 12, 31, 23, 0)

    def test_gap_raises_unresolvable(self, tz_provider: TimezoneProvider, test_timezone: str):
        with pytest.raises(UnresolvableTimeError) as exc_info:
            from_naive(datetime(2025, 3, 9, 2, 30), test_timezone, tz_provider)

        assert exc_info.value.reason is TimezoneErrorReason.TIME_UNRESOLVABLE

    def test_ambiguous_time_uses_fold(self, tz_provider: TimezoneProvider, test_timezone: str):
        """fold selects between the EDT and EST occurrences of 01:30."""
        first = from_naive(datetime(2025, 11, 2, 1, 30), test_timezone, tz_provider)
        second = from_naive(datetime(2025, 11, 2, 1, 30, fold=1), test_timezone, tz_provider)

        assert (first.zone_abbr, second.zone_abbr) == ("EDT", "EST")
        assert second.to_utc_naive() - first.to_utc_naive() == HOUR

    def test_unknown_zone(self, tz_provider: TimezoneProvider):
        with pytest.raises(UnknownTimezoneError) as exc_info:
            from_naive(datetime(2025, 1, 1), "Not/AZone", tz_provider)

        assert exc_info.value.reason is TimezoneErrorReason.TIME_ZONE_NOT_FOUND

    def test_utc_without_configuration(self):
        """Etc/UTC resolves with the default provider."""
        zoned = from_naive(datetime(2025, 1, 1, 12, 0), "Etc/UTC")

        assert zoned.utc_offset == timedelta(0)
        assert zoned.zone_abbr == "UTC"

    def test_other_zone_without_configuration_is_unknown(self):
        """The default provider knows only UTC."""
        with pytest.raises(UnknownTimezoneError):
            from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney")

    def test_uses_active_provider(self, zoneinfo_provider):
        registry.set_provider(zoneinfo_provider)

        zoned = from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney")
        assert zoned.zone_abbr == "AEDT"

    def test_rejects_aware_datetime(self, zoneinfo_provider):
        with pytest.raises(TypeError):
            from_naive(datetime(2025, 1, 1, tzinfo=timezone.utc), "Etc/UTC", zoneinfo_provider)

    def test_rejects_non_datetime(self, zoneinfo_provider):
        with pytest.raises(TypeError):
            from_naive("2025-01-01T00:00", "Etc/UTC", zoneinfo_provider)


class TestToTimezone:
    """Tests for to_timezone."""

    def test_sydney_to_new_york(self, tz_provider: TimezoneProvider):
        """10:00 AEDT on 2018-01-01 is 18:00 EST the previous evening."""
        sydney = from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney", tz_provider)

        new_york = to_timezone(sydney, "America/New_York", tz_provider)

        assert new_york.wall == datetime(2017, 12, 31, 18, 0)
        assert new_york.zone_abbr == "EST"
        assert new_york.utc_offset == -5 * HOUR
        assert new_york.std_offset == -5 * HOUR
        assert new_york.same_instant(sydney)

    def test_to_utc_needs_no_provider(self, sydney):
        """Converting to Etc/UTC works even with the UTC-only provider active."""
        utc = to_timezone(sydney, "Etc/UTC")

        assert utc.wall == datetime(2017, 12, 31, 23, 0)
        assert utc.zone_abbr == "UTC"

    def test_same_zone_returns_input(self, sydney, zoneinfo_provider):
        assert to_timezone(sydney, "Australia/Sydney", zoneinfo_provider) is sydney

    def test_unknown_target_zone(self, sydney, zoneinfo_provider):
        with pytest.raises(UnknownTimezoneError):
            to_timezone(sydney, "Not/AZone", zoneinfo_provider)

    def test_rejects_plain_datetime(self, zoneinfo_provider):
        with pytest.raises(TypeError):
            to_timezone(datetime(2025, 1, 1), "Etc/UTC", zoneinfo_provider)

    def test_round_trip_keeps_instant(self, sydney, zoneinfo_provider):
        there = to_timezone(sydney, "Asia/Kolkata", zoneinfo_provider)
        back = to_timezone(there, "Australia/Sydney", zoneinfo_provider)

        assert back == sydney


class TestConveniences:
    """Tests for from_utc, from_datetime, now and add."""

    def test_from_utc_naive_and_aware(self, zoneinfo_provider):
        naive = from_utc(datetime(2018, 7, 1, 12, 0), "Europe/London", zoneinfo_provider)
        aware = from_utc(
            datetime(2018, 7, 1, 14, 0, tzinfo=timezone(2 * HOUR)),
            "Europe/London",
            zoneinfo_provider,
        )

        assert naive == aware
        assert naive.wall == datetime(2018, 7, 1, 13, 0)
        assert naive.zone_abbr == "BST"

    def test_from_datetime(self, tz_provider: TimezoneProvider):
        aware = from_naive(
            datetime(2018, 1, 1, 10, 0), "Australia/Sydney", tz_provider
        ).to_datetime()

        london = from_datetime(aware, "Europe/London", tz_provider)

        assert london.wall == datetime(2017, 12, 31, 23, 0)
        assert london.zone_abbr == "GMT"

    def test_from_datetime_rejects_naive(self, zoneinfo_provider):
        with pytest.raises(TypeError):
            from_datetime(datetime(2025, 1, 1), "Etc/UTC", zoneinfo_provider)

    def test_now_defaults_to_utc(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        current = now()
        after = datetime.now(timezone.utc).replace(tzinfo=None)

        assert current.time_zone == "Etc/UTC"
        assert before <= current.wall <= after

    def test_now_in_zone(self, zoneinfo_provider):
        current = now("Australia/Sydney", zoneinfo_provider)
        assert current.zone_abbr in ("AEST", "AEDT")

    def test_add_across_spring_forward(self, tz_provider: TimezoneProvider, test_timezone: str):
        """One elapsed hour after 01:30 EST is 03:30 EDT."""
        start = from_naive(datetime(2025, 3, 9, 1, 30), test_timezone, tz_provider)

        later = add(start, HOUR, tz_provider)

        assert later.wall == datetime(2025, 3, 9, 3, 30)
        assert later.zone_abbr == "EDT"

    def test_add_across_fall_back(self, zoneinfo_provider, test_timezone: str):
        """One elapsed hour after 01:30 EDT repeats the wall time in EST."""
        start = from_naive(datetime(2025, 11, 2, 1, 30), test_timezone, zoneinfo_provider)

        later = add(start, HOUR, zoneinfo_provider)

        assert later.wall == start.wall
        assert later.zone_abbr == "EST"
        assert later > start
