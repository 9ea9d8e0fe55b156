"""Views responsible for authentication.

- POST /register
- POST /login
- GET  /logout
"""

import secrets

from flask import current_app, jsonify, request, session
from flask_login import login_user, logout_user
from marshmallow import ValidationError

from reportnavi.blueprints import auth
from reportnavi.core.accounts import authenticate, register
from reportnavi.core.helpers import abort
from reportnavi.core.storage import storage
from reportnavi.schemas import CredentialsSchema, UserSchema

NO_PAYLOAD = ('', 204)


def _start_session(user):
    """Log the user in and hand out a fresh CSRF token."""
    login_user(user, remember=True)
    session['csrf_token'] = secrets.token_urlsafe()
    session.permanent = True

    out_schema = UserSchema(exclude=('password_hash',))
    return jsonify(**out_schema.dump(user), csrfToken=session['csrf_token'])


def _load_credentials():
    in_schema = CredentialsSchema()
    try:
        return in_schema.load(request.get_json(silent=True) or {})
    except ValidationError as err:
        abort(400, {'message': err.messages})


@auth.route('/register', methods=['POST'])
def create_account():
    """Register a new account and log into it.
    Passing the right `admin_code` grants the admin role."""
    credentials = _load_credentials()
    user = register(storage.backend,
                    credentials['username'],
                    credentials['password'],
                    admin_code=credentials['admin_code'],
                    expected_code=current_app.config.get('ADMIN_CODE'))
    return _start_session(user)


@auth.route('/login', methods=['POST'])
def login():
    """Log in with a username and a password."""
    credentials = _load_credentials()
    user = authenticate(storage.backend, credentials['username'], credentials['password'])
    if user is None:
        abort(401, {'message': 'Invalid username or password.'})
    return _start_session(user)


@auth.route('/logout')
def logout():
    """Log out the currently signed in user."""
    logout_user()
    session.pop('csrf_token', None)
    return NO_PAYLOAD
