"""Schema for the User model."""

from marshmallow import validate, post_load

from reportnavi.extensions import ma
from reportnavi.models import User, UserRole, USERNAME_MAX_LENGTH


# pylint: disable=missing-docstring

class UserSchema(ma.Schema):
    username = ma.Str(required=True, validate=validate.Length(min=1, max=USERNAME_MAX_LENGTH))
    role = ma.Enum(UserRole, by_value=True, required=True)
    points = ma.Int(load_default=0, validate=validate.Range(min=0))
    member_since = ma.Str(data_key='memberSince', required=True)
    profile_pic = ma.Str(data_key='profilePic', allow_none=True, load_default=None)
    password_hash = ma.Str(data_key='passwordHash', required=True)

    @post_load
    def make_user(self, data, **_kwargs):
        return User(**data)


class ProfilePicSchema(ma.Schema):
    profile_pic = ma.Str(data_key='profilePic', required=True, allow_none=True)


class CredentialsSchema(ma.Schema):
    username = ma.Str(required=True, validate=validate.Length(max=USERNAME_MAX_LENGTH))
    password = ma.Str(required=True, load_only=True)
    admin_code = ma.Str(load_default=None)
