"""Application configuration for production."""

import os
from base64 import b64decode
from datetime import timedelta

from reportnavi.config.common import *


SECRET_KEY = b64decode(os.environ['SECRET_KEY'])

SQLALCHEMY_DATABASE_URI = os.environ['DATABASE_URL']

ADMIN_CODE = os.environ['ADMIN_CODE']

SESSION_COOKIE_SECURE = True
REMEMBER_COOKIE_SECURE = True
REMEMBER_COOKIE_DURATION = timedelta(days=60)
PERMANENT_SESSION_LIFETIME = int(REMEMBER_COOKIE_DURATION.total_seconds())
