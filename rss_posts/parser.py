from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from feedparser.datetimes import _parse_date  # type: ignore[attr-defined]


def parse_pub_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a feed date string into a timezone-aware UTC datetime.

    Relies on feedparser's date handlers, which cover RFC 822 (RSS),
    ISO 8601 / W3DTF (Atom, JSON APIs) and a few regional variants.
    Returns None for anything they reject, and for dates they accept that
    datetime cannot represent (year 0, year 10000 after a UTC shift).
    Free-form dates such as "January 15, 2024" are not recognized either,
    so JSON sources using them rank as invalid.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = _parse_date(value.strip())
    except (ValueError, OverflowError):
        return None
    if not isinstance(parsed, time.struct_time):
        return None
    try:
        # feedparser normalizes to UTC; timegm keeps it there
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def _get_pub_date(entry: Dict[str, Any]) -> str:
    # Keep the raw string; ranking parses it later
    for key in ("published", "updated"):
        val = entry.get(key)
        if isinstance(val, str) and val.strip():
            return val.strip()
    return ""


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a dict with common fields.
    Fields: title, link, pub_date (raw string, may be empty)
    """
    title = (entry.get("title") or "").strip()
    link = (entry.get("link") or entry.get("feedburner_origlink") or "").strip()

    return {
        "title": title,
        "link": link,
        "pub_date": _get_pub_date(entry),
    }
