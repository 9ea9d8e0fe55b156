"""Schema for the Report and ReportFile models."""

from marshmallow import validate, post_load

from reportnavi.extensions import ma
from reportnavi.models import (
    CATEGORY_MAX_LENGTH,
    Report,
    ReportDraft,
    ReportFile,
    ReportStatus,
    TITLE_MAX_LENGTH,
)


# pylint: disable=missing-docstring

class ReportFileSchema(ma.Schema):
    name = ma.Str(required=True)
    type = ma.Str(required=True)
    url = ma.Str(required=True)

    @post_load
    def make_file(self, data, **_kwargs):
        return ReportFile(**data)


class ReportSchema(ma.Schema):
    id = ma.Str(required=True)
    user = ma.Str(required=True)
    category = ma.Str(required=True)
    title = ma.Str(required=True)
    description = ma.Str(load_default='')
    location = ma.Str(load_default='')
    date = ma.Str(required=True)
    status = ma.Enum(ReportStatus, by_value=True, load_default=ReportStatus.pending)
    files = ma.List(ma.Nested(ReportFileSchema), load_default=list)
    thumbnail = ma.Str(load_default='')

    @post_load
    def make_report(self, data, **_kwargs):
        return Report(**data)


class ReportDraftSchema(ma.Schema):
    '''The fields a user fills in when submitting a report.'''
    category = ma.Str(load_default='', validate=validate.Length(max=CATEGORY_MAX_LENGTH))
    title = ma.Str(required=True, validate=validate.Length(max=TITLE_MAX_LENGTH))
    description = ma.Str(load_default='')
    location = ma.Str(load_default='')
    files = ma.List(ma.Nested(ReportFileSchema), load_default=list)

    @post_load
    def make_draft(self, data, **_kwargs):
        return ReportDraft(**data)


class StatusChangeSchema(ma.Schema):
    status = ma.Enum(ReportStatus, by_value=True, required=True)
