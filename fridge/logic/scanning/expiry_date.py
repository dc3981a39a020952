"""Expiration-date extraction from OCR text.

A token is a month/year pair written MM/YY, MM/YYYY, MM-YY or MM-YYYY. It is
normalized to "MM/YY" and accepted only when it is the current month or later,
compared on (two-digit year, month). Years are never widened back to four
digits, so "01/99" counts as later than "01/05".
"""
from __future__ import annotations
import calendar
import re
from datetime import date
from typing import Iterable, Optional

__all__ = [
    "DATE_TOKEN_RE", "extract_expiration_date", "first_expiration_date",
    "guess_product_name", "token_to_date",
]

# Four-digit year is tried first so "03/2026" is not cut to "03/20".
DATE_TOKEN_RE = re.compile(r"(0[1-9]|1[0-2])[/-](\d{4}|\d{2})")


def extract_expiration_date(text: str, today: Optional[date] = None) -> Optional[str]:
    """Return the first month/year token in text as "MM/YY", or None.

    Only the leftmost match is considered; when it is already in the past the
    result is None even if a later token on the same line would pass.
    """
    if not isinstance(text, str):
        return None
    match = DATE_TOKEN_RE.search(text)
    if match is None:
        return None

    month_str, year_str = match.group(1), match.group(2)
    month = int(month_str)
    if not 1 <= month <= 12:
        return None
    year = year_str[-2:]

    today = today or date.today()
    yy = int(year)
    current_yy = today.year % 100
    if yy > current_yy or (yy == current_yy and month >= today.month):
        return f"{month_str}/{year}"
    return None


def first_expiration_date(lines: Iterable[str], today: Optional[date] = None) -> Optional[str]:
    """First accepted token across several recognized text lines."""
    for line in lines:
        token = extract_expiration_date(line, today)
        if token is not None:
            return token
    return None


def guess_product_name(lines: Iterable[str]) -> Optional[str]:
    """Pick the first line that looks like a label rather than a date."""
    for line in lines:
        text = (line or "").strip()
        if len(text) > 3 and "/" not in text and "exp" not in text.lower():
            return text
    return None


def token_to_date(token: str) -> date:
    """Last day of the month named by an "MM/YY" token.

    Raises ValueError for anything that is not a valid token.
    """
    month_str, sep, year_str = token.partition("/")
    if not sep or len(month_str) != 2 or len(year_str) != 2:
        raise ValueError(f"Not an MM/YY token: {token!r}")
    month, year = int(month_str), 2000 + int(year_str)
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range in token: {token!r}")
    return date(year, month, calendar.monthrange(year, month)[1])
