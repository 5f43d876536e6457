"""Date helpers for post file names."""

from __future__ import annotations

import re
from datetime import date

# Post file names always start with an ISO calendar date: "YYYY-MM-DD".
_ISO_DATE_FORMAT = "%Y-%m-%d"
_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def today_local() -> date:
    """Return the current date in the local timezone."""

    return date.today()


def to_iso_date(day: date) -> str:
    return day.strftime(_ISO_DATE_FORMAT)


def parse_iso_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` into a ``date``.

    Raises ``ValueError`` for any other shape, including unpadded parts
    (``2025-6-1``), compact dates and full timestamps.
    """

    text = value.strip()
    if not _ISO_DATE_RE.fullmatch(text):
        raise ValueError(f"Expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(text)
