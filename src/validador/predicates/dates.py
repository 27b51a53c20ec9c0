"""Date and date-time predicates.

Values are parsed leniently: ISO 8601 (``2024-05-31``, ``2024-05-31T10:30``,
``2024-05-31 10:30:00``) and the slash or day-first forms
(``2024/05/31``, ``31-05-2024``, ``31/05/2024``). Bounds may be strings in
the same forms, ``date`` or ``datetime``.

Format checks (``date_format``, ``datetime_format``) only look at shape.
"""

import re
from datetime import date, datetime
from typing import Any

from validador.predicates._values import as_text

type DateLike = str | date | datetime

_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%d-%m-%Y",
    "%d/%m/%Y",
)


def parse_date(value: Any) -> datetime | None:
    """Best-effort parse; ``None`` when *value* is not a date."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = as_text(value).strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is None:
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is not None and parsed.tzinfo is not None:
        # Compare wall-clock values; bounds are naive
        parsed = parsed.replace(tzinfo=None)
    return parsed


# ---------------------------------------------------------------------------
# Validity and ranges
# ---------------------------------------------------------------------------


def valid(value: Any) -> bool:
    return parse_date(value) is not None


def min_date(value: Any, low: DateLike) -> bool:
    parsed, bound = parse_date(value), parse_date(low)
    return parsed is not None and bound is not None and parsed >= bound


def max_date(value: Any, high: DateLike) -> bool:
    parsed, bound = parse_date(value), parse_date(high)
    return parsed is not None and bound is not None and parsed <= bound


def date_between(value: Any, low: DateLike, high: DateLike) -> bool:
    """Inclusive; any unparsable side fails."""
    parsed, start, end = parse_date(value), parse_date(low), parse_date(high)
    if parsed is None or start is None or end is None:
        return False
    return start <= parsed <= end


# Date-times use the same comparison; the name documents intent at call sites
datetime_between = date_between


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

DATE_FORMATS: dict[str, re.Pattern[str]] = {
    "YYYY-MM-DD": re.compile(r"^\d{4}-\d{2}-\d{2}$"),
    "YYYY/MM/DD": re.compile(r"^\d{4}/\d{2}/\d{2}$"),
    "DD-MM-YYYY": re.compile(r"^\d{2}-\d{2}-\d{4}$"),
    "DD/MM/YYYY": re.compile(r"^\d{2}/\d{2}/\d{4}$"),
}

DATETIME_FORMATS: dict[str, re.Pattern[str]] = {
    "YYYY-MM-DD": re.compile(r"^\d{4}-\d{2}-\d{2}$"),
    "YYYY-MM-DD HH": re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}$"),
    "YYYY-MM-DD HH:MM": re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$"),
    "YYYY-MM-DD HH:MM:SS": re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"),
    "YYYY/MM/DD HH:MM": re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}$"),
    "YYYY/MM/DD HH:MM:SS": re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}$"),
}

# Precision levels for flexible_datetime
LEVELS = {
    "day": "YYYY-MM-DD",
    "hour": "YYYY-MM-DD HH",
    "minute": "YYYY-MM-DD HH:MM",
    "second": "YYYY-MM-DD HH:MM:SS",
}


def date_format(value: Any, fmt: str = "YYYY-MM-DD") -> bool:
    """Shape check; unknown formats fall back to ``YYYY-MM-DD``."""
    pattern = DATE_FORMATS.get(fmt, DATE_FORMATS["YYYY-MM-DD"])
    return bool(pattern.match(as_text(value).strip()))


def datetime_format(value: Any, fmt: str | re.Pattern[str] = "YYYY-MM-DD HH:MM:SS") -> bool:
    """Shape check against a named format or a compiled pattern."""
    if isinstance(fmt, re.Pattern):
        pattern = fmt
    else:
        pattern = DATETIME_FORMATS.get(fmt, DATETIME_FORMATS["YYYY-MM-DD HH:MM:SS"])
    return bool(pattern.match(as_text(value).strip()))


def flexible_datetime(value: Any, level: str | re.Pattern[str] = "minute") -> bool:
    """Date-time written down to *level* (``day`` ... ``second``)."""
    if isinstance(level, re.Pattern):
        return bool(level.match(as_text(value).strip()))
    return datetime_format(value, LEVELS.get(level, level))
