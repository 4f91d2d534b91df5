from datetime import datetime, timezone
from typing import Optional

from flask import request
from dateutil.parser import parse

from hopeshare.domain.invariants.exceptions import InvariantViolation, StaleWrite


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def unmodified_since_header() -> Optional[datetime]:
    """
    Reads the If-Unmodified-Since header of the current request.
    Returns None when the client did not ask for a version check.
    """
    raw = request.headers.get("If-Unmodified-Since")
    if not raw:
        return None

    try:
        return normalize_ts(parse(raw))
    except (ValueError, OverflowError) as exc:
        raise InvariantViolation("Invalid If-Unmodified-Since header") from exc


def enforce_optimistic_lock(entity, client_ts: Optional[datetime]) -> None:
    """
    Rejects the write when the stored row changed after client_ts.
    Without a client timestamp the last write wins.
    """
    if client_ts is None or entity.updated_at is None:
        return

    server_ts = normalize_ts(entity.updated_at)

    if server_ts > normalize_ts(client_ts):
        raise StaleWrite("Conflict detected. Resource has been modified.")
