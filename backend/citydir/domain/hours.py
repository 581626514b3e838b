from datetime import datetime
from typing import Optional


def _minutes(value: str) -> Optional[int]:
    parts = value.strip().split(":")
    if len(parts) != 2:
        return None
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return hours * 60 + minutes


def is_open_now(working_hours: Optional[str], now: Optional[datetime] = None) -> bool:
    """
    Evaluate a "HH:MM-HH:MM" working-hours string against a clock.

    Both ends are inclusive at minute precision. Missing or malformed
    strings are always closed.
    """
    if not working_hours or "-" not in working_hours:
        return False

    start_raw, _, end_raw = working_hours.partition("-")
    start = _minutes(start_raw)
    end = _minutes(end_raw)
    if start is None or end is None:
        return False

    now = now or datetime.now()
    current = now.hour * 60 + now.minute
    return start <= current <= end
