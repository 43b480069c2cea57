"""Date parsing utilities."""

from datetime import date, timedelta

from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts "today", "yesterday", ISO dates ("2024-01-15") and the other
    formats python-dateutil understands. Slash dates are read day first
    ("05/03/2024" is 5 March).

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    normalized = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
    }
    if normalized in relative_dates:
        return relative_dates[normalized]

    try:
        return date.fromisoformat(normalized)
    except ValueError:
        pass

    try:
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}'") from e
