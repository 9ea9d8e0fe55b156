"""Miscellaneous helper functions for the views."""

import hmac
import json

from flask import abort as flask_abort, Response, session, request, current_app


BODY_METHODS = ('POST', 'PATCH')
MODIFYING_METHODS = ('POST', 'PATCH', 'DELETE')


def abort(http_code: int, message=None):
    """Wraps the default Flask's abort function to return a plain JSON response."""
    if message is not None:
        flask_abort(Response(json.dumps(message), status=http_code, mimetype='application/json'))
    else:
        flask_abort(Response(status=http_code))


def csrf_protect():
    """Validates the CSRF token for modifying requests (POST, PATCH, DELETE)."""
    if not current_app.config.get('CSRF_ENABLED', True):
        return

    if request.method not in MODIFYING_METHODS:
        return

    if not hmac.compare_digest(request.headers.get('X-CSRF-Token', ''),
                               session.get('csrf_token', '')):
        abort(403, {'message': 'CSRF token invalid.'})


def require_json():
    """Ensure JSON Content-Type for requests with a body (POST, PATCH)."""
    if request.method not in BODY_METHODS:
        return

    if not request.is_json:
        abort(400, {'message': 'The request should be in JSON.'})
