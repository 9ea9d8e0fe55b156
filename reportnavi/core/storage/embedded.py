"""Stores the data in a local embedded database.

The database is a single SQLite file used as a key-value store: every collection
is a table of `(key, doc)` pairs where `doc` is the JSON record. Filtering and
sorting happen in Python after a full read."""

from contextlib import contextmanager
from dataclasses import replace
import json
import logging
import os
import sqlite3
from typing import List, Optional

from marshmallow import ValidationError as SchemaError

from reportnavi.core.errors import BackendError, ConflictError
from reportnavi.core.timezone import parse_iso
from reportnavi.models import Activity, Report, User
from reportnavi.schemas import ActivitySchema, ReportSchema, UserSchema

from .base import StoreBase

log = logging.getLogger(__name__)

SCHEMA_VERSION = 3
COLLECTIONS = ('users', 'reports', 'activities')


def _recency(record):
    return (parse_iso(record.date), record.id)


class EmbeddedStore(StoreBase):
    """Implementation of the storage backend using a local SQLite file.

    Each write is durable on its own, so `atomic()` does not group anything here."""

    def __init__(self, path='./reportnavi_local.db'):
        self.path = path
        directory = os.path.dirname(os.path.abspath(path))
        if not os.path.exists(directory):
            os.makedirs(directory)

        self.user_schema = UserSchema()
        self.report_schema = ReportSchema()
        self.activity_schema = ActivitySchema()

    def is_remote_backend(self) -> bool:
        return False

    @property
    def initialized(self) -> bool:
        """Return whether the database file has ever been created."""
        return os.path.exists(self.path)

    def _upgrade(self, conn: sqlite3.Connection):
        """Bring the database to the current schema version."""
        version = conn.execute('PRAGMA user_version').fetchone()[0]
        if version >= SCHEMA_VERSION:
            return

        for name in COLLECTIONS:
            conn.execute(f'CREATE TABLE IF NOT EXISTS {name} '
                         f'(key TEXT PRIMARY KEY, doc TEXT NOT NULL)')
        conn.execute(f'PRAGMA user_version = {SCHEMA_VERSION}')
        log.info(f'Embedded database {self.path} upgraded to version {SCHEMA_VERSION}')

    @contextmanager
    def _connect(self, action: str):
        """Open the database, commit on success and wrap SQLite errors into BackendError."""
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as err:
            log.exception(f'Embedded backend failed to open {self.path}')
            raise BackendError(f'Could not {action}.', err) from err

        try:
            self._upgrade(conn)
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as err:
            conn.rollback()
            log.warning(f'Embedded backend refused to {action}: {err}')
            raise ConflictError(f'Could not {action}: it conflicts with a stored record.',
                                err) from err
        except sqlite3.Error as err:
            conn.rollback()
            log.exception(f'Embedded backend failed to {action}')
            raise BackendError(f'Could not {action}.', err) from err
        finally:
            conn.close()

    def _read_all(self, collection: str, schema, action: str) -> list:
        if not self.initialized:
            return []

        with self._connect(action) as conn:
            rows = conn.execute(f'SELECT doc FROM {collection}').fetchall()
        return [self._decode(doc, schema, action) for (doc,) in rows]

    def _read_one(self, collection: str, key: str, schema, action: str):
        if not self.initialized:
            return None

        with self._connect(action) as conn:
            row = conn.execute(f'SELECT doc FROM {collection} WHERE key = ?', (key,)).fetchone()
        return self._decode(row[0], schema, action) if row is not None else None

    @staticmethod
    def _decode(doc: str, schema, action: str):
        try:
            return schema.load(json.loads(doc))
        except (ValueError, SchemaError) as err:
            log.exception(f'Embedded backend found a corrupt record while trying to {action}')
            raise BackendError(f'Could not {action}: corrupt record.', err) from err

    def list_users(self) -> List[User]:
        return self._read_all('users', self.user_schema, 'list users')

    def get_user(self, username: str) -> Optional[User]:
        return self._read_one('users', username, self.user_schema, 'get a user')

    def create_user(self, user: User):
        doc = json.dumps(self.user_schema.dump(user))
        with self._connect('register a user') as conn:
            conn.execute('INSERT INTO users (key, doc) VALUES (?, ?)', (user.username, doc))

    def upsert_user(self, user: User):
        doc = json.dumps(self.user_schema.dump(user))
        with self._connect('save a user') as conn:
            conn.execute('INSERT OR REPLACE INTO users (key, doc) VALUES (?, ?)',
                         (user.username, doc))

    def list_reports(self) -> List[Report]:
        reports = self._read_all('reports', self.report_schema, 'list reports')
        return sorted(reports, key=_recency, reverse=True)

    def get_report(self, report_id: str) -> Optional[Report]:
        return self._read_one('reports', report_id, self.report_schema, 'get a report')

    def create_report(self, report: Report):
        doc = json.dumps(self.report_schema.dump(self.with_utc_date(report)))
        with self._connect('insert a report') as conn:
            conn.execute('INSERT INTO reports (key, doc) VALUES (?, ?)', (report.id, doc))

    def update_report(self, report_id: str, **fields):
        self.check_update_fields(fields)
        with self._connect('update a report') as conn:
            row = conn.execute('SELECT doc FROM reports WHERE key = ?', (report_id,)).fetchone()
            if row is None:
                log.warning(f'Tried to update a missing report {report_id}')
                return
            report = replace(self._decode(row[0], self.report_schema, 'update a report'), **fields)
            conn.execute('UPDATE reports SET doc = ? WHERE key = ?',
                         (json.dumps(self.report_schema.dump(report)), report_id))

    def delete_report(self, report_id: str):
        with self._connect('delete a report') as conn:
            conn.execute('DELETE FROM reports WHERE key = ?', (report_id,))

    def list_activities(self, username: str) -> List[Activity]:
        activities = self._read_all('activities', self.activity_schema, 'list activities')
        return sorted((activity for activity in activities if activity.username == username),
                      key=_recency, reverse=True)

    def append_activity(self, activity: Activity):
        doc = json.dumps(self.activity_schema.dump(self.with_utc_date(activity)))
        with self._connect('insert an activity') as conn:
            conn.execute('INSERT INTO activities (key, doc) VALUES (?, ?)', (activity.id, doc))
