from datetime import datetime
from typing import Any, Optional, Tuple

from dateutil.parser import isoparse

from citydir.errors import ValidationError


def parse_timestamp(value: Any, field: str) -> Optional[datetime]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    try:
        return isoparse(str(value))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"'{field}' is not an ISO 8601 timestamp") from exc


def resolve_date_range(
    start: Optional[datetime],
    end: Optional[datetime],
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Collapse a pair of bounds into a stored interval.

    - start and end -> closed interval [start, end]
    - start only    -> open-ended interval [start, )
    - otherwise     -> no date constraint (None, None)
    """
    if start is None:
        return None, None

    if end is not None and _earlier(end, start):
        raise ValidationError("end_date must not be earlier than start_date")

    return start, end


def _earlier(a: datetime, b: datetime) -> bool:
    if (a.tzinfo is None) != (b.tzinfo is None):
        # SQLite hands back naive datetimes; compare on the wall clock
        return a.replace(tzinfo=None) < b.replace(tzinfo=None)
    return a < b
