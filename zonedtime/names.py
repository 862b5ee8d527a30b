"""Zone name normalization.

Zone names that arrive from outside (calendar exports, user input, legacy
configs) are often Windows display names or obsolete IANA aliases. These
helpers map them to the canonical names providers understand.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import UTC_ZONE
from .providers.base import TimezoneProvider
from .registry import get_provider

logger = logging.getLogger(__name__)

# Windows zone display names to IANA identifiers.
# https://learn.microsoft.com/en-us/windows-hardware/manufacture/desktop/default-time-zones
WINDOWS_TZ_MAP: dict[str, str] = {
    # Americas
    "Pacific Standard Time": "America/Los_Angeles",
    "Mountain Standard Time": "America/Denver",
    "US Mountain Standard Time": "America/Phoenix",
    "Central Standard Time": "America/Chicago",
    "Eastern Standard Time": "America/New_York",
    "Alaskan Standard Time": "America/Anchorage",
    "Hawaiian Standard Time": "Pacific/Honolulu",
    "Atlantic Standard Time": "America/Halifax",
    "Newfoundland Standard Time": "America/St_Johns",
    "E. South America Standard Time": "America/Sao_Paulo",
    "Argentina Standard Time": "America/Argentina/Buenos_Aires",
    "Pacific SA Standard Time": "America/Santiago",
    "SA Pacific Standard Time": "America/Bogota",
    # Europe & Africa
    "UTC": UTC_ZONE,
    "GMT Standard Time": "Europe/London",
    "W. Europe Standard Time": "Europe/Berlin",
    "Romance Standard Time": "Europe/Paris",
    "Central Europe Standard Time": "Europe/Budapest",
    "Central European Standard Time": "Europe/Warsaw",
    "E. Europe Standard Time": "Europe/Chisinau",
    "FLE Standard Time": "Europe/Helsinki",
    "GTB Standard Time": "Europe/Bucharest",
    "Russian Standard Time": "Europe/Moscow",
    "South Africa Standard Time": "Africa/Johannesburg",
    "Egypt Standard Time": "Africa/Cairo",
    "Morocco Standard Time": "Africa/Casablanca",
    # Asia
    "India Standard Time": "Asia/Kolkata",
    "China Standard Time": "Asia/Shanghai",
    "Tokyo Standard Time": "Asia/Tokyo",
    "Korea Standard Time": "Asia/Seoul",
    "Singapore Standard Time": "Asia/Singapore",
    "SE Asia Standard Time": "Asia/Bangkok",
    "Arabian Standard Time": "Asia/Dubai",
    "Iran Standard Time": "Asia/Tehran",
    "Israel Standard Time": "Asia/Jerusalem",
    "Pakistan Standard Time": "Asia/Karachi",
    "Nepal Standard Time": "Asia/Kathmandu",
    # Australia & Pacific
    "AUS Eastern Standard Time": "Australia/Sydney",
    "AUS Central Standard Time": "Australia/Darwin",
    "Cen. Australia Standard Time": "Australia/Adelaide",
    "E. Australia Standard Time": "Australia/Brisbane",
    "Tasmania Standard Time": "Australia/Hobart",
    "W. Australia Standard Time": "Australia/Perth",
    "New Zealand Standard Time": "Pacific/Auckland",
    "Lord Howe Standard Time": "Australia/Lord_Howe",
}

# Obsolete or alternative names mapped to canonical IANA identifiers.
TZ_ALIAS_MAP: dict[str, str] = {
    "UTC": UTC_ZONE,
    "GMT": UTC_ZONE,
    "Etc/GMT": UTC_ZONE,
    "Etc/Universal": UTC_ZONE,
    "Etc/Zulu": UTC_ZONE,
    "Universal": UTC_ZONE,
    "Zulu": UTC_ZONE,
    "US/Pacific": "America/Los_Angeles",
    "US/Mountain": "America/Denver",
    "US/Arizona": "America/Phoenix",
    "US/Central": "America/Chicago",
    "US/Eastern": "America/New_York",
    "US/Alaska": "America/Anchorage",
    "US/Hawaii": "Pacific/Honolulu",
    "Australia/NSW": "Australia/Sydney",
    "Australia/ACT": "Australia/Sydney",
    "Australia/Victoria": "Australia/Melbourne",
    "Australia/Queensland": "Australia/Brisbane",
    "Australia/West": "Australia/Perth",
    "Asia/Calcutta": "Asia/Kolkata",
    "Asia/Rangoon": "Asia/Yangon",
    "Asia/Saigon": "Asia/Ho_Chi_Minh",
    "America/Godthab": "America/Nuuk",
    "GB": "Europe/London",
    "Japan": "Asia/Tokyo",
    "NZ": "Pacific/Auckland",
}


def windows_tz_to_iana(windows_tz: str) -> Optional[str]:
    """Convert a Windows zone display name to an IANA identifier.

    Returns:
        IANA identifier (e.g. "America/Denver") or None if not mapped
    """
    return WINDOWS_TZ_MAP.get(windows_tz.strip())


def resolve_timezone_alias(tz_name: str) -> str:
    """Resolve an alias to its canonical identifier; other names pass through.

    Examples:
        >>> resolve_timezone_alias("US/Pacific")
        'America/Los_Angeles'
        >>> resolve_timezone_alias("GMT")
        'Etc/UTC'
    """
    return TZ_ALIAS_MAP.get(tz_name.strip(), tz_name.strip())


def normalize_timezone_name(
    tz_str: Optional[str], provider: Optional[TimezoneProvider] = None
) -> Optional[str]:
    """Normalize a zone string to a name the provider recognizes.

    Tries, in order, the Windows map, the alias map and the name as given,
    accepting the first candidate that the provider knows (``Etc/UTC`` is
    always accepted).

    Returns:
        Canonical zone name, or None if nothing resolves
    """
    if not tz_str or not tz_str.strip():
        return None

    active = provider if provider is not None else get_provider()
    candidates = [windows_tz_to_iana(tz_str), resolve_timezone_alias(tz_str)]
    for candidate in candidates:
        if not candidate:
            continue
        if candidate == UTC_ZONE or active.is_known(candidate):
            if candidate != tz_str:
                logger.debug("Normalized time zone %r -> %r", tz_str, candidate)
            return candidate

    logger.warning("Could not normalize time zone %r with %s provider", tz_str, active.name)
    return None
