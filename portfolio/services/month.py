import datetime as dt


def resolve_month_window(month: str | None) -> tuple[dt.date, dt.date, str]:
    if month:
        try:
            parsed = dt.datetime.strptime(month, "%Y-%m")
        except ValueError as exc:
            raise ValueError("Month must be in YYYY-MM format") from exc
        year = parsed.year
        month_value = parsed.month
    else:
        now = dt.date.today()
        year = now.year
        month_value = now.month

    start = dt.date(year, month_value, 1)
    if month_value == 12:
        end = dt.date(year + 1, 1, 1)
    else:
        end = dt.date(year, month_value + 1, 1)

    month_label = f"{year:04d}-{month_value:02d}"
    return start, end, month_label


def parse_year(raw: str | int | None, today: dt.date | None = None) -> int:
    """Return ``raw`` as a calendar year, or the current year when it is unusable.

    Malformed input is never an error: anything that is not a whole number in
    ``1..9999`` silently becomes the current year.
    """
    fallback = (today or dt.date.today()).year
    if raw is None:
        return fallback
    if isinstance(raw, bool):
        return fallback
    if isinstance(raw, int):
        year = raw
    else:
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            return fallback
        year = int(text)
    if not dt.MINYEAR <= year <= dt.MAXYEAR:
        return fallback
    return year


def resolve_year_window(year: int) -> tuple[dt.date, dt.date]:
    """Inclusive first and last day of ``year``."""
    return dt.date(year, 1, 1), dt.date(year, 12, 31)


def as_aware(value: dt.datetime) -> dt.datetime:
    """Read a naive datetime as UTC so it can be compared with stored values."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value
