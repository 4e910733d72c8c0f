from datetime import date, datetime, timedelta
import calendar
from utils.constants import DATE_FORMAT


def today() -> date:
    return date.today()


def now() -> datetime:
    return datetime.now().replace(microsecond=0)


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_datetime(dt: datetime) -> str:
    """ISO 8601, keeping microseconds and any UTC offset."""
    return dt.isoformat()


def parse_datetime(value: str) -> datetime:
    """Parse a stored ISO timestamp. Raises ValueError on malformed input."""
    return datetime.fromisoformat(value)


def clamp_day_to_month(year: int, month: int, day: int) -> int:
    """Clamp day to valid range for the given year/month."""
    max_day = calendar.monthrange(year, month)[1]
    return min(day, max_day)


def add_months(d: date, n: int) -> date:
    """Add n months to date d, clamping day to month end."""
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    day = clamp_day_to_month(year, month, d.day)
    return d.replace(year=year, month=month, day=day)


def add_months_dt(dt: datetime, n: int) -> datetime:
    d = add_months(dt.date(), n)
    return dt.replace(year=d.year, month=d.month, day=d.day)


def week_range(ref: date) -> tuple[date, date]:
    """Monday..Sunday of the week containing ref."""
    start = ref - timedelta(days=ref.weekday())
    return start, start + timedelta(days=6)


def month_range(ref: date) -> tuple[date, date]:
    start = ref.replace(day=1)
    last_day = calendar.monthrange(ref.year, ref.month)[1]
    return start, ref.replace(day=last_day)


def quarter_range(ref: date) -> tuple[date, date]:
    first_month = ((ref.month - 1) // 3) * 3 + 1
    start = date(ref.year, first_month, 1)
    end = add_months(start, 3) - timedelta(days=1)
    return start, end


def year_range(ref: date) -> tuple[date, date]:
    return date(ref.year, 1, 1), date(ref.year, 12, 31)


def days_until(end: date, ref: date) -> int:
    """Whole days from ref to end; negative once end has passed."""
    return (end - ref).days
