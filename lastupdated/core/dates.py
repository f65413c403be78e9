"""
lastupdated/core/dates.py
Date helpers for the "Last updated" label.

Timezone and locale are explicit arguments (defaulting to config) so the
rendered string never depends on the host machine.
"""

from datetime import datetime, tzinfo
from typing import Optional, Union

import pytz

from lastupdated.core.config import DISPLAY_LOCALE, DISPLAY_TZ, INVALID_DATE, MONTH_NAMES

# Tried in order after ISO-8601 fails
_FALLBACK_FORMATS = (
    "%B %d, %Y",                  # May 14, 2023
    "%b %d, %Y",                  # Sep 14, 2023
    "%d %B %Y",                   # 14 May 2023
    "%d %b %Y",                   # 14 Sep 2023
    "%m/%d/%Y",                   # 05/14/2023
    "%Y/%m/%d",                   # 2023/05/14
    "%a, %d %b %Y %H:%M:%S GMT",  # HTTP date
)


def _localize(dt: datetime, tz: tzinfo) -> datetime:
    if hasattr(tz, "localize"):       # pytz zones
        return tz.localize(dt)
    return dt.replace(tzinfo=tz)


def _parse_str(raw: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            dt = datetime.strptime(raw, fmt)
        except ValueError:
            continue
        if fmt.endswith("GMT"):
            dt = pytz.UTC.localize(dt)
        return dt
    return None


def parse_iso(value: Union[str, datetime, None], tz: tzinfo = DISPLAY_TZ) -> Optional[datetime]:
    """
    '2023-05-14T10:00:00Z' → aware datetime. Naive input is read in `tz`.

    Besides ISO-8601 only the fixed English layouts in _FALLBACK_FORMATS are
    understood ('May 14, 2023', '05/14/2023', ...). Anything else → None.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value.strip():
        dt = _parse_str(value.strip())
        if dt is None:
            return None
    else:
        return None
    if dt.tzinfo is None:
        dt = _localize(dt, tz)
    return dt


def format_date(
    value: Union[str, datetime, None],
    tz: tzinfo = DISPLAY_TZ,
    locale: str = DISPLAY_LOCALE,
) -> str:
    """'2023-05-14T10:00:00Z' → 'May 14, 2023'. Unparseable → 'Invalid Date'."""
    months = MONTH_NAMES.get(locale)
    if months is None:
        raise ValueError(f"Unsupported display locale: {locale!r}")

    dt = parse_iso(value, tz)
    if dt is None:
        return INVALID_DATE
    local = dt.astimezone(tz)
    return f"{months[local.month - 1]} {local.day}, {local.year}"
