"""Date parsing for form-encoded book fields."""

from datetime import date, datetime
from typing import Optional

# Tried in order, first match wins
DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d",
)


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a date string against DATE_FORMATS. Returns None if no format matches."""
    if not value:
        return None

    value = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    return None
