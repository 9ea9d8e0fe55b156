"""The activity ledger: an append-only record of what happened to whom."""

from datetime import datetime
import itertools
import logging
import secrets
from typing import List

from reportnavi.core.storage import StoreBase
from reportnavi.core.timezone import tz_aware_now
from reportnavi.models import Activity, ActivityType

log = logging.getLogger(__name__)

_sequence = itertools.count()


def new_activity_id(moment: datetime) -> str:
    """Return an ID that sorts by time of recording, then by order of recording.

    The sequence number breaks ties between entries of the same clock tick."""
    micros = int(moment.timestamp() * 1_000_000)
    return f'{micros:016d}-{next(_sequence):010d}-{secrets.token_hex(2)}'


class ActivityLedger:
    """Appends activities through the storage backend and reads them back per user.

    Entries are never changed or removed. The title of the report is copied into
    the entry so that the history survives the deletion of the report."""

    def __init__(self, store: StoreBase):
        self.store = store

    def record(self, username: str, kind: ActivityType, target_title: str,
               points_change: int = 0) -> Activity:
        """Append a new entry about the given user and return it."""
        moment = tz_aware_now()
        activity = Activity(id=new_activity_id(moment),
                            username=username,
                            type=kind,
                            target_title=target_title,
                            points_change=points_change,
                            date=moment.isoformat(timespec='microseconds'))
        self.store.append_activity(activity)
        log.debug(f'Recorded {kind.value} for {username} ({points_change:+d} points)')
        return activity

    def history(self, username: str) -> List[Activity]:
        """Return the entries about the given user, most recent first."""
        return self.store.list_activities(username)
