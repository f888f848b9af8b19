"""Date helpers for subgraph entity ids (all UTC)."""

from datetime import datetime, timezone

from predy_fees.config.settings import SECONDS_PER_DAY


def format_timestamp_as_date(timestamp: int) -> str:
    """Unix timestamp -> "DD/MM/YYYY"."""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).strftime("%d/%m/%Y")


def entity_date(timestamp: int) -> str:
    """Unix timestamp -> "YYYY-MM-DD", the date part of daily entity ids."""
    day, month, year = format_timestamp_as_date(timestamp).split("/")
    return f"{year}-{month}-{day}"


def previous_day(timestamp: int) -> int:
    return int(timestamp) - SECONDS_PER_DAY


def parse_date(date_string: str) -> int:
    """Parse a YYYY-MM-DD date into the Unix timestamp of 00:00 UTC."""
    dt = datetime.strptime(date_string, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    return int(dt.timestamp())
