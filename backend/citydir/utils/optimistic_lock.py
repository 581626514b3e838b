from datetime import timezone
from flask import request
from dateutil.parser import parse
from citydir.errors import StaleWriteError, ValidationError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def unmodified_since():
    """
    Read the If-Unmodified-Since header of the current request.

    Returns None when the client did not ask for a precondition.
    """
    raw = request.headers.get("If-Unmodified-Since")
    if not raw:
        return None

    try:
        return normalize_ts(parse(raw))
    except (ValueError, OverflowError) as exc:
        raise ValidationError("Invalid If-Unmodified-Since header") from exc


def enforce_unmodified_since(since, *timestamps):
    """
    Raise StaleWriteError if any of the rows changed after ``since``.
    """
    if since is None:
        return

    for ts in timestamps:
        if ts is not None and normalize_ts(ts) > since:
            raise StaleWriteError("Conflict detected. Resource has been modified.")
