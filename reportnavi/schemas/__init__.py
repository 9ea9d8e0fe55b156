"""This module contains the schemas for serialization/deserialization
of the records and of the API payloads."""

from .activity import *
from .report import *
from .user import *
