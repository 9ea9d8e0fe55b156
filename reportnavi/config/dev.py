"""Application configuration for local development."""

import os
from reportnavi.config.common import *


SECRET_KEY = b'\x8e\x11\xf0\x9a(\x04\xcf\x1b\xb2\x1d\x93U\x8c\xd7Ay'

SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///reportnavi_dev.db')

ADMIN_CODE = os.getenv('ADMIN_CODE', '1234')

CSRF_ENABLED = False
