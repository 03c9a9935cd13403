from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta, timezone

from zoneinfo import ZoneInfo

# Calendar days are interpreted in the producers' local timezone
DEFAULT_TIMEZONE_NAME = "America/Sao_Paulo"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def today(tz: ZoneInfo = DEFAULT_TZ) -> date:
    return datetime.now(tz).date()


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, assuming DEFAULT_TZ for naive values."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=DEFAULT_TZ)
    return dt.astimezone(timezone.utc)


def is_valid_date_string(value: object) -> bool:
    return isinstance(value, str) and bool(_DATE_RE.match(value))


def normalize_date(value: object) -> date | None:
    """Return the calendar date for `value` or None when it cannot be parsed.

    Accepts `date`, `datetime` and ISO strings (plain YYYY-MM-DD or full
    timestamps, with optional trailing 'Z'). Aware datetimes are reduced to
    their UTC calendar date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    s = value.strip()
    if is_valid_date_string(s):
        try:
            return date.fromisoformat(s)
        except ValueError:
            return None
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return normalize_date(datetime.fromisoformat(s))
    except ValueError:
        return None


def is_valid_date(value: object) -> bool:
    return normalize_date(value) is not None


def format_date(value: object, fmt: str = "dd/mm/yyyy") -> str:
    """Format a date for display ('dd/mm/yyyy', 'dd/mm', 'mm/yyyy' or ISO)."""
    if not value:
        return "N/A"
    d = normalize_date(value)
    if d is None:
        return "Data inválida"
    if fmt == "dd/mm/yyyy":
        return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"
    if fmt == "dd/mm":
        return f"{d.day:02d}/{d.month:02d}"
    if fmt == "mm/yyyy":
        return f"{d.month:02d}/{d.year:04d}"
    return d.isoformat()


def months_between(start: object, end: object | None = None) -> int | None:
    """Whole months from `start` to `end` (today when omitted); may be negative."""
    start_d = normalize_date(start)
    end_d = normalize_date(end) if end is not None else today()
    if start_d is None or end_d is None:
        return None
    months = (end_d.year - start_d.year) * 12 + (end_d.month - start_d.month)
    if end_d.day < start_d.day:
        months -= 1
    return months


def age_in_months(birth_date: object, *, reference: date | None = None) -> int | None:
    months = months_between(birth_date, reference)
    if months is None:
        return None
    return max(months, 0)


def describe_age(birth_date: object, *, reference: date | None = None) -> str:
    if not birth_date:
        return "Idade desconhecida"
    months = age_in_months(birth_date, reference=reference)
    if months is None:
        return "Data de nascimento inválida"
    if months < 12:
        return f"{months} {'mês' if months == 1 else 'meses'}"
    years, rest = divmod(months, 12)
    text = f"{years} {'ano' if years == 1 else 'anos'}"
    if rest > 0:
        text += f" e {rest} {'mês' if rest == 1 else 'meses'}"
    return text


def add_days(value: object, days: int) -> date | None:
    d = normalize_date(value)
    if d is None:
        return None
    return d + timedelta(days=days)


def subtract_days(value: object, days: int) -> date | None:
    return add_days(value, -days)


def days_ago(value: object, *, reference: date | None = None) -> int | None:
    d = normalize_date(value)
    if d is None:
        return None
    return ((reference or today()) - d).days


def days_until(value: object, *, reference: date | None = None) -> int | None:
    d = normalize_date(value)
    if d is None:
        return None
    return (d - (reference or today())).days


def is_today(value: object, *, reference: date | None = None) -> bool:
    return normalize_date(value) == (reference or today())


def is_past(value: object, *, reference: date | None = None) -> bool:
    days = days_ago(value, reference=reference)
    return days is not None and days > 0


def is_future(value: object, *, reference: date | None = None) -> bool:
    days = days_until(value, reference=reference)
    return days is not None and days > 0


def compare_dates(a: object, b: object) -> int:
    """-1, 0 or 1; invalid inputs compare as equal."""
    da, db = normalize_date(a), normalize_date(b)
    if da is None or db is None:
        return 0
    return (da > db) - (da < db)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def anchor_datetime(d: date) -> datetime:
    """Noon UTC of `d`, used when only a calendar date is known.

    Noon keeps the calendar day stable when read back in DEFAULT_TZ.
    """
    return datetime.combine(d, time(12, 0), tzinfo=timezone.utc)


def local_date(dt: datetime) -> date:
    return to_utc(dt).astimezone(DEFAULT_TZ).date()
