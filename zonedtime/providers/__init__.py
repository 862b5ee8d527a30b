"""Timezone providers.

Only the contract and the UTC-only default are imported here; the
library-backed providers are imported on demand by ``zonedtime.registry``:

- ``zonedtime.providers.zoneinfo_provider.ZoneInfoProvider``
- ``zonedtime.providers.pytz_provider.PytzProvider``
- ``zonedtime.providers.dateutil_provider.DateutilProvider``
"""

from .base import TimezoneProvider, TzinfoProvider, order_periods
from .utc_only import UTCOnlyProvider

__all__ = [
    "TimezoneProvider",
    "TzinfoProvider",
    "UTCOnlyProvider",
    "order_periods",
]
