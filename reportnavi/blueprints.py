"""Blueprint creation module. Allows specifying the name and the URL prefix.

To register a blueprint, add it to the `all_blueprints` tuple.
"""

import logging

from flask import Blueprint, jsonify

from reportnavi.core.errors import (
    AuthorizationError,
    BackendError,
    InvalidStateError,
    InvalidTransitionError,
    ValidationError,
)
from reportnavi.core.helpers import csrf_protect, require_json

log = logging.getLogger(__name__)


def _factory(partial_module_string, url_prefix='/'):
    """Generates blueprint objects for view modules.
    Positional arguments:
    partial_module_string -- string representing a view module without
        the absolute path (e.g. 'report' for reportnavi.views.report).
    url_prefix -- URL prefix passed to the blueprint.
    Returns:
    Blueprint instance for a view module.
    """
    name = partial_module_string
    import_name = 'reportnavi.views'
    blueprint = Blueprint(name, import_name, url_prefix=url_prefix)

    @blueprint.errorhandler(401)
    def _unauthorized_no_body(_error):
        '''Prevent sending the HTML body with the 401 response.'''
        return '', 401

    @blueprint.errorhandler(403)
    def _forbidden_no_body(_error):
        '''Prevent sending the HTML body with the 403 response.'''
        return '', 403

    @blueprint.errorhandler(AuthorizationError)
    def _not_allowed(error):
        return jsonify(message=error.message), 403

    @blueprint.errorhandler(ValidationError)
    @blueprint.errorhandler(InvalidTransitionError)
    @blueprint.errorhandler(InvalidStateError)
    def _bad_request(error):
        return jsonify(message=error.message), 400

    @blueprint.errorhandler(BackendError)
    def _backend_unavailable(error):
        log.error(f'Storage failure: {error.message} ({error.cause!r})')
        return jsonify(message='The storage is unavailable, please try again.'), 503

    return blueprint


api = _factory('api', url_prefix='/api/v1')
api.before_request(csrf_protect)
api.before_request(require_json)
auth = _factory('auth')

all_blueprints = (api, auth)
