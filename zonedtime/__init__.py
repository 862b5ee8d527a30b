"""zonedtime - timezone-aware timestamps with pluggable timezone providers.

Naive wall-clock times are bound to named zones through a timezone provider
selected by configuration::

    [tool.zonedtime]
    timezone_provider = "zoneinfo"

Without configuration only UTC is available.

Example usage (with the zoneinfo provider configured):
    >>> from datetime import datetime
    >>> from zonedtime import from_naive, to_timezone
    >>>
    >>> sydney = from_naive(datetime(2018, 1, 1, 10, 0), "Australia/Sydney")
    >>> str(sydney)
    '2018-01-01 10:00:00+11:00 AEDT Australia/Sydney'
    >>> str(to_timezone(sydney, "America/New_York"))
    '2017-12-31 18:00:00-05:00 EST America/New_York'
"""

__version__ = "0.1.0"

from .config_loader import Config, load_config
from .datetime_ops import add, from_datetime, from_naive, from_utc, now, to_timezone
from .exceptions import (
    ProviderConfigurationError,
    TimezoneError,
    TimezoneErrorReason,
    UnknownTimezoneError,
    UnresolvableTimeError,
    ZonedTimeError,
)
from .models import UTC_ZONE, TimezonePeriod, ZonedDateTime
from .names import normalize_timezone_name, resolve_timezone_alias, windows_tz_to_iana
from .providers import TimezoneProvider, UTCOnlyProvider
from .registry import (
    available_providers,
    build_provider,
    get_provider,
    reset_provider,
    set_provider,
    use_provider,
)

__all__ = [
    "UTC_ZONE",
    "Config",
    "ProviderConfigurationError",
    "TimezoneError",
    "TimezoneErrorReason",
    "TimezonePeriod",
    "TimezoneProvider",
    "UTCOnlyProvider",
    "UnknownTimezoneError",
    "UnresolvableTimeError",
    "ZonedDateTime",
    "ZonedTimeError",
    "add",
    "available_providers",
    "build_provider",
    "from_datetime",
    "from_naive",
    "from_utc",
    "get_provider",
    "load_config",
    "normalize_timezone_name",
    "now",
    "reset_provider",
    "resolve_timezone_alias",
    "set_provider",
    "to_timezone",
    "use_provider",
    "windows_tz_to_iana",
]
