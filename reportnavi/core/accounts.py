"""Registration, authentication and profile updates.

Also contains the function to load the user for the login manager."""

import hmac
import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from reportnavi.core.errors import ConflictError, ValidationError
from reportnavi.core.storage import StoreBase, storage
from reportnavi.core.timezone import iso_now
from reportnavi.extensions import login_manager
from reportnavi.models import User, UserRole, USERNAME_MAX_LENGTH

log = logging.getLogger(__name__)

USERNAME_TAKEN = 'Username already exists.'


def register(store: StoreBase, username: str, password: str,
             admin_code: Optional[str] = None, expected_code: Optional[str] = None) -> User:
    """Create a new member account, or an admin one if the right code is given."""
    username = (username or '').strip()
    if not username:
        raise ValidationError('The username cannot be empty.')
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f'The username is longer than {USERNAME_MAX_LENGTH} characters.')
    if not password:
        raise ValidationError('The password cannot be empty.')
    if store.get_user(username) is not None:
        raise ValidationError(USERNAME_TAKEN)

    is_admin = (admin_code is not None and expected_code is not None
                and hmac.compare_digest(admin_code.encode(), expected_code.encode()))
    user = User(username=username,
                role=UserRole.admin if is_admin else UserRole.member,
                password_hash=generate_password_hash(password),
                member_since=iso_now(),
                points=0)
    try:
        store.create_user(user)
    except ConflictError as err:
        raise ValidationError(USERNAME_TAKEN) from err
    log.info(f'Registered {username} as {user.role.value}')
    return user


def authenticate(store: StoreBase, username: str, password: str) -> Optional[User]:
    """Return the user if the credentials match, None otherwise."""
    user = store.get_user(username)
    if user is None or not check_password_hash(user.password_hash, password):
        log.info(f'Failed login attempt for {username}')
        return None
    return user


def update_profile_pic(store: StoreBase, user: User, profile_pic: Optional[str]) -> User:
    """Change the avatar of the user.

    The stored record is re-read first, so a stale balance held by the caller
    never overwrites awarded points."""
    current = store.get_user(user.username)
    if current is None:
        raise ValidationError(f'User {user.username} does not exist.')
    current.profile_pic = profile_pic
    store.upsert_user(current)
    return current


@login_manager.user_loader
def load_user(username):
    """Return a user instance by the username."""
    return storage.backend.get_user(username)
