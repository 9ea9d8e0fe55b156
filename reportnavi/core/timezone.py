"""A helper function that returns a timezone-aware datetime object for
the current moment in time, and its ISO-8601 rendering used in records."""

from datetime import datetime, timezone
from functools import partial


tz_aware_now = partial(datetime.now, tz=timezone.utc)


def iso_now() -> str:
    """Return the current UTC moment as an ISO-8601 string."""
    return tz_aware_now().isoformat(timespec="microseconds")


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    moment = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def normalize_iso(value: str) -> str:
    """Render an ISO-8601 timestamp in UTC with microseconds.

    Normalized values sort the same way as strings and as moments."""
    return parse_iso(value).astimezone(timezone.utc).isoformat(timespec='microseconds')
