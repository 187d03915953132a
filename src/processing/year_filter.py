# src/processing/year_filter.py
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from src.domain.errors import InvalidTimestampError
from src.utils.type_utils import safe_int


UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
REPORT_DATE_FORMAT = "%d-%m-%Y %H:%M:%S" # e.g. 14-11-2023 22:13:20


def parse_block_timestamp(value: Any) -> int:
    """
    Parses a wire-format block time (Unix seconds) into an int.
    Accepts ints and base-10 integer strings. Anything else means the upstream
    payload is malformed and raises InvalidTimestampError.
    """
    if value is None or (isinstance(value, str) and not value):
        raise InvalidTimestampError("block time is missing", value=value)
    try:
        return safe_int(value, raise_error=True)
    except ValueError:
        raise InvalidTimestampError(f"block time {value!r} is not a base-10 integer", value=value) from None


def normalize_tax_year(year: Any) -> int:
    """Accepts a 4-digit year string or an int between 1 and 9999."""
    if isinstance(year, str):
        if len(year) != 4 or not year.isdigit() or not year.isascii():
            raise ValueError(f"Tax year must be a 4-digit year, got {year!r}")
        year = int(year)
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValueError(f"Tax year must be a 4-digit year, got {year!r}")
    if not 1 <= year <= 9999:
        raise ValueError(f"Tax year must be a 4-digit year, got {year}")
    return year


def timestamp_to_utc(timestamp: Any) -> datetime:
    """
    Converts Unix seconds to an aware UTC datetime.
    Computed from the epoch directly so the result never depends on the local
    time zone or on platform limits of fromtimestamp().
    """
    ts = parse_block_timestamp(timestamp)
    try:
        return UNIX_EPOCH + timedelta(seconds=ts)
    except OverflowError:
        raise InvalidTimestampError(f"block time {ts} is outside the supported date range", value=timestamp) from None


def is_in_tax_year(timestamp: Any, tax_year: Any) -> bool:
    return timestamp_to_utc(timestamp).year == normalize_tax_year(tax_year)


def format_report_date(timestamp: Any) -> str:
    """Renders a block time as 'DD-MM-YYYY HH:MM:SS' in UTC."""
    return timestamp_to_utc(timestamp).strftime(REPORT_DATE_FORMAT)


def filter_date_for_year(timestamp: Any, tax_year: Any) -> Optional[str]:
    """
    Returns the formatted UTC date if the event falls into tax_year, else None.
    The year is taken from the UTC calendar date, so 01-01 00:00:00 belongs to
    the new year and 12-31 23:59:59 to the old one.
    """
    event_dt = timestamp_to_utc(timestamp)
    if event_dt.year != normalize_tax_year(tax_year):
        return None
    return event_dt.strftime(REPORT_DATE_FORMAT)
