"""Views related to the User model and the activity ledger.

User:
- GET    /account
- GET    /accounts/{username}
- PATCH  /account/profile_pic
- GET    /account/timeline
- GET    /accounts/{username}/timeline
"""

from flask import request
from flask_login import login_required, current_user
from marshmallow import ValidationError

from reportnavi.blueprints import api
from reportnavi.core.accounts import update_profile_pic
from reportnavi.core.helpers import abort
from reportnavi.core.ledger import ActivityLedger
from reportnavi.core.storage import storage
from reportnavi.schemas import ActivitySchema, ProfilePicSchema, UserSchema


@api.route('/account', defaults={'username': None})
@api.route('/accounts/<username>')
@login_required
def get_info(username):
    """Get information about an account.
    If the username is not passed, return information about self."""
    if username is None:
        username = current_user.username

    user = storage.backend.get_user(username)
    if user is None:
        abort(404)

    out_schema = UserSchema(exclude=('password_hash',))
    return out_schema.jsonify(user)


@api.route('/account/profile_pic', methods=['PATCH'])
@login_required
def change_profile_pic():
    """Change the avatar of the logged in user."""
    in_schema = ProfilePicSchema()
    try:
        data = in_schema.load(request.json)
    except ValidationError as err:
        abort(400, {'message': err.messages})

    user = update_profile_pic(storage.backend, current_user, data['profile_pic'])

    out_schema = UserSchema(exclude=('password_hash',))
    return out_schema.jsonify(user)


@api.route('/account/timeline', defaults={'username': None})
@api.route('/accounts/<username>/timeline')
@login_required
def get_timeline(username):
    """Get the activity history of an account, most recent first."""
    if username is None:
        username = current_user.username

    ledger = ActivityLedger(storage.backend)
    out_schema = ActivitySchema(many=True)
    return out_schema.jsonify(ledger.history(username))
