"""Application configuration for the test suite.

The storage backend and the embedded database path are read from the environment
on every load, see `tests/conftest.py`."""

import os
from reportnavi.config.common import *


SECRET_KEY = b'test-secret-key'
TESTING = True

SQLALCHEMY_DATABASE_URI = 'sqlite://'

STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'remote')
EMBEDDED_DB_PATH = os.getenv('EMBEDDED_DB_PATH', './reportnavi_test.db')

ADMIN_CODE = '1234'

CSRF_ENABLED = False
