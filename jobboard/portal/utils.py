"""
Small helper functions used across the portal parsers.
No document traversal here, only text processing.
"""

import re
from typing import Optional

from jobboard.core.models import HoursPerWeek

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(text: str) -> Optional[int]:
    """
    Parse the integer at the start of `text`, ignoring anything after it
    ("12.50" -> 12, "15 hrs" -> 15). Returns None when there are no digits.
    """
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_hours(text: str) -> Optional[HoursPerWeek]:
    """
    Hours per week: "10" -> 10, "10-15" -> (10, 15).
    """
    if "-" in text:
        low, high = text.split("-", 1)
        low_val, high_val = parse_leading_int(low), parse_leading_int(high)
        if low_val is None or high_val is None:
            return None
        return (low_val, high_val)
    return parse_leading_int(text)


def normalize_city(value: str) -> str:
    """
    Clean up a free-text city: drop a trailing state suffix ("Amherst MA"),
    strip punctuation, collapse whitespace and title-case each word.
    """
    normalized = re.sub(r"\s+MA$", "", value, flags=re.IGNORECASE)
    normalized = re.sub(r"[^\w ]", "", normalized, flags=re.ASCII)
    normalized = re.sub(r"\s+", " ", normalized)
    normalized = normalized.lower()
    normalized = re.sub(
        r"\b\w", lambda m: m.group(0).upper(), normalized, flags=re.ASCII
    )
    return normalized.strip()
