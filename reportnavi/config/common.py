"""The base application configuration."""

import os


SQLALCHEMY_TRACK_MODIFICATIONS = False
MAX_CONTENT_LENGTH = 16 * 1024 * 1024

STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'remote')
EMBEDDED_DB_PATH = os.getenv('EMBEDDED_DB_PATH', './reportnavi_local.db')

CSRF_ENABLED = True
