"""The User model.

Also contains the UserRole enum."""

from enum import Enum
from typing import Optional

from flask_login.mixins import UserMixin


USERNAME_MAX_LENGTH = 64


class UserRole(Enum):
    """Represents the role of an account."""
    admin = 'admin'
    member = 'member'


class User(UserMixin):
    """Represents a registered community member.

    The point balance is read-only from the outside. It grows only through
    the verify transition of the report workflow."""

    def __init__(self, username: str, role: UserRole, password_hash: str, member_since: str,
                 points: int = 0, profile_pic: Optional[str] = None):
        if points < 0:
            raise ValueError('The point balance cannot be negative.')
        self.username = username
        self.role = role
        self.password_hash = password_hash
        self.member_since = member_since
        self.profile_pic = profile_pic
        self._points = points

    @property
    def points(self) -> int:
        """Return the user's reputation balance."""
        return self._points

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.admin

    def get_id(self):
        """Return the username, which identifies the user for the login manager."""
        return self.username

    def _award(self, amount: int):
        """Credit the balance. Reserved for `reportnavi.core.workflow`."""
        if amount < 0:
            raise ValueError('Awards cannot be negative.')
        self._points += amount

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return (self.username, self.role, self.password_hash, self.member_since,
                self._points, self.profile_pic) == \
               (other.username, other.role, other.password_hash, other.member_since,
                other._points, other.profile_pic)

    __hash__ = None

    def __repr__(self):
        return f'<User {self.username!r} role={self.role.value} points={self._points}>'
