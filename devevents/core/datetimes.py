from __future__ import annotations

from datetime import date, datetime, timezone
import re

from dateutil import parser as dateutil_parser

from devevents.core.errors import ValidationError

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_24H = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
_TIME_12H = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)", re.ASCII)


def normalize_date(value: str, now: datetime | None = None) -> str:
    """Return ``value`` as a ``YYYY-MM-DD`` string in UTC.

    A strict ``YYYY-MM-DD`` literal is read as that calendar date without any
    timezone conversion. Any other expression goes through ``dateutil``; naive
    results are taken as UTC and aware ones are converted to UTC.
    """
    text = value.strip() if isinstance(value, str) else ""
    iso_match = _ISO_DATE.fullmatch(text)
    if iso_match:
        year, month, day = (int(part) for part in iso_match.groups())
        try:
            return date(year, month, day).isoformat()
        except ValueError:
            raise ValidationError("date", value, f"Invalid date format: {value}") from None

    if not text or not text.isascii():
        raise ValidationError("date", value, f"Invalid date format: {value}")

    current = now or datetime.now(tz=timezone.utc)
    default = datetime(current.year, 1, 1)
    try:
        parsed = dateutil_parser.parse(text, default=default)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc).date().isoformat()
    except (ValueError, OverflowError):
        raise ValidationError("date", value, f"Invalid date format: {value}") from None


def normalize_time(value: str) -> str:
    """Return ``value`` as a zero-padded 24-hour ``HH:MM`` string.

    Accepts ``H:MM``/``HH:MM`` and ``H:MM AM``/``H:MM PM`` (marker in any case,
    space before it optional).
    """
    text = value.strip().upper() if isinstance(value, str) else ""

    match_24h = _TIME_24H.fullmatch(text)
    if match_24h:
        hours, minutes = int(match_24h.group(1)), int(match_24h.group(2))
        if 0 <= hours <= 23 and 0 <= minutes <= 59:
            return f"{hours:02d}:{minutes:02d}"

    match_12h = _TIME_12H.fullmatch(text)
    if match_12h:
        hours, minutes = int(match_12h.group(1)), int(match_12h.group(2))
        period = match_12h.group(3)
        if 1 <= hours <= 12 and 0 <= minutes <= 59:
            if period == "PM" and hours != 12:
                hours += 12
            elif period == "AM" and hours == 12:
                hours = 0
            return f"{hours:02d}:{minutes:02d}"

    raise ValidationError("time", value, f"Invalid time format: {value}")
