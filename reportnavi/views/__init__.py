"""This module contains the views (API endpoints)."""

from .account import *
from .authentication import *
from .report import *
from .statistics import *
