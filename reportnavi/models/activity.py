"""The Activity model."""

from dataclasses import dataclass
from enum import Enum


class ActivityType(Enum):
    """Represents the kind of action an activity records."""
    submit = 'submit'
    verify = 'verify'
    resolve = 'resolve'
    decline = 'decline'
    delete = 'delete'


@dataclass(frozen=True)
class Activity:
    """Represents an immutable entry of the activity ledger."""
    id: str
    username: str
    type: ActivityType
    target_title: str
    points_change: int
    date: str
