# blogfront/formatting.py
import math
from datetime import datetime
from typing import Optional

WORDS_PER_MINUTE = 200


def read_time_minutes(content: str) -> int:
    words = (content or "").split(" ")
    return math.ceil(len(words) / WORDS_PER_MINUTE)


def read_time_label(content: str) -> str:
    return f"{read_time_minutes(content)} min"


def parse_iso(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def long_date(value: str) -> str:
    """'2025-01-05T10:00:00Z' -> 'January 5, 2025'. Unparseable input is returned as is."""
    dt = parse_iso(value)
    if dt is None:
        return value or ""
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def short_date(value: str) -> str:
    """'2025-01-05T10:00:00Z' -> '1/5/2025'."""
    dt = parse_iso(value)
    if dt is None:
        return value or ""
    return f"{dt.month}/{dt.day}/{dt.year}"
