"""Schema for the Activity model."""

from marshmallow import post_load

from reportnavi.extensions import ma
from reportnavi.models import Activity, ActivityType


# pylint: disable=missing-docstring

class ActivitySchema(ma.Schema):
    id = ma.Str(required=True)
    username = ma.Str(required=True)
    type = ma.Enum(ActivityType, by_value=True, required=True)
    target_title = ma.Str(data_key='targetTitle', required=True)
    points_change = ma.Int(data_key='pointsChange', load_default=0)
    date = ma.Str(required=True)

    @post_load
    def make_activity(self, data, **_kwargs):
        return Activity(**data)
