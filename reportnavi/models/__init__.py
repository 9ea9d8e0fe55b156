"""This module contains the entities shared by the storage backends and the workflow."""

from .activity import Activity, ActivityType
from .report import (
    Report,
    ReportDraft,
    ReportFile,
    ReportStatus,
    ALLOWED_TRANSITIONS,
    CATEGORY_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    UPDATABLE_FIELDS,
)
from .user import User, UserRole, USERNAME_MAX_LENGTH


__all__ = (
    'Activity',
    'ActivityType',
    'Report',
    'ReportDraft',
    'ReportFile',
    'ReportStatus',
    'ALLOWED_TRANSITIONS',
    'CATEGORY_MAX_LENGTH',
    'TITLE_MAX_LENGTH',
    'UPDATABLE_FIELDS',
    'User',
    'UserRole',
    'USERNAME_MAX_LENGTH',
)
