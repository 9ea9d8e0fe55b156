"""Storage module. The backend is chosen once, when the application is created.

Set `STORAGE_BACKEND` to `remote` (default) to keep the data in the relational database
configured by `SQLALCHEMY_DATABASE_URI`, or to `embedded` to keep it in a local
SQLite file at `EMBEDDED_DB_PATH`."""

import logging

from flask import current_app

from reportnavi.extensions import db
from .base import StoreBase
from .embedded import EmbeddedStore
from .remote import RemoteStore

log = logging.getLogger(__name__)

BACKENDS = ('remote', 'embedded')


class Storage:
    """Flask extension exposing the storage backend of the current application."""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        kind = app.config.get('STORAGE_BACKEND', 'remote')
        if kind == 'remote':
            backend = RemoteStore(db)
        elif kind == 'embedded':
            backend = EmbeddedStore(app.config.get('EMBEDDED_DB_PATH', './reportnavi_local.db'))
        else:
            raise ValueError(f'Unknown storage backend {kind!r}, expected one of {BACKENDS}')

        app.extensions['storage'] = backend
        log.info(f'Using the {kind} storage backend')

    @property
    def backend(self) -> StoreBase:
        """Return the backend of the application in the current context."""
        return current_app.extensions['storage']


storage = Storage()


__all__ = (
    'BACKENDS',
    'EmbeddedStore',
    'RemoteStore',
    'Storage',
    'StoreBase',
    'storage',
)
