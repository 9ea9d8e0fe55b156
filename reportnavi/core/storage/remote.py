"""Stores the data in a remote relational database through Flask-SQLAlchemy."""

from contextlib import contextmanager
import logging
from typing import List, Optional

from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from reportnavi.core.errors import BackendError, ConflictError
from reportnavi.models import Activity, Report, User

from .base import StoreBase
from .tables import ActivityRecord, ReportRecord, UserRecord

log = logging.getLogger(__name__)

ATOMIC_DEPTH = 'reportnavi.atomic_depth'


class RemoteStore(StoreBase):
    """Implementation of the storage backend using a relational database.

    Writes made inside `atomic()` are committed together or not at all."""

    def __init__(self, database):
        self.db = database

    def is_remote_backend(self) -> bool:
        return True

    @contextmanager
    def _guard(self, action: str):
        """Roll back the session and wrap database errors into BackendError."""
        try:
            yield
        except IntegrityError as err:
            self.db.session.rollback()
            log.warning(f'Remote backend refused to {action}: {err.orig}')
            raise ConflictError(f'Could not {action}: it conflicts with a stored record.',
                                err) from err
        except SQLAlchemyError as err:
            self.db.session.rollback()
            log.exception(f'Remote backend failed to {action}')
            raise BackendError(f'Could not {action}.', err) from err

    def _shift_depth(self, step: int) -> int:
        """Change the nesting level of `atomic()` blocks in the current session.

        The session is scoped to the application context, so concurrent requests
        never see each other's level."""
        info = self.db.session().info
        info[ATOMIC_DEPTH] = info.get(ATOMIC_DEPTH, 0) + step
        return info[ATOMIC_DEPTH]

    def _commit(self):
        if self._shift_depth(0):
            self.db.session.flush()
        else:
            self.db.session.commit()

    @contextmanager
    def atomic(self):
        self._shift_depth(+1)
        try:
            yield self
        except Exception:
            if not self._shift_depth(-1):
                self.db.session.rollback()
            raise
        if not self._shift_depth(-1):
            with self._guard('commit the transaction'):
                self.db.session.commit()

    def list_users(self) -> List[User]:
        with self._guard('list users'):
            return [record.to_entity() for record in UserRecord.query.all()]

    def get_user(self, username: str) -> Optional[User]:
        with self._guard('get a user'):
            record = self.db.session.get(UserRecord, username)
            return record.to_entity() if record is not None else None

    def create_user(self, user: User):
        with self._guard('register a user'):
            self.db.session.execute(
                insert(UserRecord).values(**UserRecord.columns_of(user))
            )
            self._commit()

    def upsert_user(self, user: User):
        with self._guard('save a user'):
            self.db.session.merge(UserRecord.from_entity(user))
            self._commit()

    def list_reports(self) -> List[Report]:
        with self._guard('list reports'):
            records = ReportRecord.query.order_by(ReportRecord.date.desc(),
                                                  ReportRecord.id.desc()).all()
            return [record.to_entity() for record in records]

    def get_report(self, report_id: str) -> Optional[Report]:
        with self._guard('get a report'):
            record = self.db.session.get(ReportRecord, report_id)
            return record.to_entity() if record is not None else None

    def create_report(self, report: Report):
        with self._guard('insert a report'):
            self.db.session.add(ReportRecord.from_entity(self.with_utc_date(report)))
            self._commit()

    def update_report(self, report_id: str, **fields):
        self.check_update_fields(fields)
        if 'files' in fields:
            fields['files'] = ReportRecord.dump_files(fields['files'])

        with self._guard('update a report'):
            record = self.db.session.get(ReportRecord, report_id)
            if record is None:
                log.warning(f'Tried to update a missing report {report_id}')
                return
            for key, value in fields.items():
                setattr(record, key, value)
            self._commit()

    def delete_report(self, report_id: str):
        with self._guard('delete a report'):
            ReportRecord.query.filter_by(id=report_id).delete()
            self._commit()

    def list_activities(self, username: str) -> List[Activity]:
        with self._guard('list activities'):
            records = ActivityRecord.query.filter_by(username=username).order_by(
                ActivityRecord.date.desc(),
                ActivityRecord.id.desc(),
            ).all()
            return [record.to_entity() for record in records]

    def append_activity(self, activity: Activity):
        with self._guard('insert an activity'):
            self.db.session.add(ActivityRecord.from_entity(self.with_utc_date(activity)))
            self._commit()
