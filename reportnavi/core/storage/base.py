"""Provides a base interface for the storage backends to implement."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import replace
from typing import List, Optional

from reportnavi.core.timezone import normalize_iso
from reportnavi.models import Activity, Report, User, UPDATABLE_FIELDS


class StoreBase(ABC):
    """Base abstract class as an interface for storage backends.

    Every backend keeps the same contract:
    - `list_reports` returns reports sorted by creation date, most recent first;
    - `list_activities` returns the user's activities, most recent first;
    - `update_report` only touches the fields it is given;
    - dates are stored in UTC with microseconds, so both backends order alike.
    Failures are raised as `BackendError`."""

    @abstractmethod
    def is_remote_backend(self) -> bool:
        """Return whether the data lives in the remote database. For display only."""

    @abstractmethod
    def list_users(self) -> List[User]:
        """Get all the registered users."""

    @abstractmethod
    def create_user(self, user: User):
        """Insert a new user. Raise ConflictError if the username is taken."""

    @abstractmethod
    def upsert_user(self, user: User):
        """Insert the user or overwrite the one with the same username."""

    @abstractmethod
    def list_reports(self) -> List[Report]:
        """Get all the reports, most recent first."""

    @abstractmethod
    def create_report(self, report: Report):
        """Store a new report."""

    @abstractmethod
    def update_report(self, report_id: str, **fields):
        """Change the given fields of a report, leaving the rest untouched."""

    @abstractmethod
    def delete_report(self, report_id: str):
        """Delete the report with the given ID."""

    @abstractmethod
    def list_activities(self, username: str) -> List[Activity]:
        """Get the activities of the given user, most recent first."""

    @abstractmethod
    def append_activity(self, activity: Activity):
        """Add an entry to the activity ledger."""

    def get_user(self, username: str) -> Optional[User]:
        """Return the user with the given username or None."""
        return next((user for user in self.list_users() if user.username == username), None)

    def get_report(self, report_id: str) -> Optional[Report]:
        """Return the report with the given ID or None."""
        return next((report for report in self.list_reports() if report.id == report_id), None)

    @contextmanager
    def atomic(self):
        """Group the writes made inside the block.

        By default every write is durable on its own and nothing is undone on failure."""
        yield self

    @staticmethod
    def check_update_fields(fields: dict):
        """Reject partial updates that touch unknown or immutable fields.

        A new `date` is normalized to UTC in place."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f'Cannot update report fields: {", ".join(sorted(unknown))}')
        if 'date' in fields:
            fields['date'] = normalize_iso(fields['date'])

    @staticmethod
    def with_utc_date(record):
        """Return a copy of the report or activity with its date normalized to UTC."""
        return replace(record, date=normalize_iso(record.date))
