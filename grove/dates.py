"""Free-form date parsing for sorting."""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# tried in order; the first format that parses wins
DATE_FORMATS = (
    "%Y-%m-%d",  # 2024-01-15
    "%B %d, %Y",  # January 15, 2024
    "%b %d, %Y",  # Jan 15, 2024
    "%d/%m/%Y",  # 15/01/2024
    "%m/%d/%Y",  # 01/15/2024
)


def _strptime(value: str, fmt: str) -> Optional[dt.date]:
    try:
        return dt.datetime.strptime(value, fmt).date()
    except ValueError:
        return None


def parse_date(value: Optional[str]) -> Optional[dt.date]:
    """Parse ``value`` with the first matching format, or return None.

    Slash dates such as ``01/02/2024`` are read day-first. When the month-first
    reading is also valid and differs, the ambiguity is logged.
    """
    if not value:
        return None
    value = value.strip()
    for fmt in DATE_FORMATS:
        parsed = _strptime(value, fmt)
        if parsed is None:
            continue
        if fmt == "%d/%m/%Y":
            other = _strptime(value, "%m/%d/%Y")
            if other is not None and other != parsed:
                logger.info("Ambiguous date '%s' read as day-first (%s)", value, parsed.isoformat())
        return parsed
    return None
