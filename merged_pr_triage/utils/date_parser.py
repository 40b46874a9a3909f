"""Date parsing for the triage cutoff argument."""

from datetime import datetime, timezone


def parse_date_input(date_str: str) -> datetime:
    """Parse various date formats into timezone-aware datetime objects.

    Supports:
    - ISO dates: 2024-01-01, 2024-01-01T10:00:00Z, 2024-01-01T10:00:00+02:00
    - Common formats: January 1, 2024, Jan 1 2024

    Values without an explicit offset are taken to be UTC, matching the
    timestamps GitHub returns.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed datetime object, always timezone-aware

    Raises:
        ValueError: If date format is not recognized
    """
    date_str = date_str.strip()

    # Common date formats to try
    formats = [
        "%Y-%m-%d",  # 2024-01-01
        "%Y-%m-%dT%H:%M:%SZ",  # 2024-01-01T10:00:00Z
        "%Y-%m-%dT%H:%M:%S",  # 2024-01-01T10:00:00
        "%Y-%m-%d %H:%M:%S",  # 2024-01-01 10:00:00
        "%B %d, %Y",  # January 1, 2024
        "%b %d, %Y",  # Jan 1, 2024
        "%B %d %Y",  # January 1 2024
        "%b %d %Y",  # Jan 1 2024
        "%Y/%m/%d",  # 2024/01/01
        "%m/%d/%Y",  # 01/01/2024
    ]

    for fmt in formats:
        try:
            return _as_utc(datetime.strptime(date_str, fmt))
        except ValueError:
            continue

    # Offsets such as +02:00 are only handled by the ISO parser
    try:
        return _as_utc(datetime.fromisoformat(date_str))
    except ValueError:
        pass

    # If none of the formats worked, raise a helpful error
    raise ValueError(
        f"Unable to parse date '{date_str}'. "
        f"Supported formats include: YYYY-MM-DD, YYYY-MM-DDTHH:MM:SSZ, "
        f"YYYY-MM-DDTHH:MM:SS+HH:MM, 'January 1, 2024', 'Jan 1 2024', MM/DD/YYYY"
    )


def _as_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
