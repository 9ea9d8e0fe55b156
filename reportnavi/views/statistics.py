"""Views delivering statistics and diagnostics.

- GET /statistics
- GET /account/statistics
- GET /storage
"""

from flask import jsonify
from flask_login import login_required, current_user

from reportnavi.blueprints import api
from reportnavi.core.statistics import report_statistics
from reportnavi.core.storage import storage


@api.route('/statistics')
@login_required
def get_report_stats():
    """Return the amount of reports in each status."""
    return jsonify(report_statistics(storage.backend.list_reports()))


@api.route('/account/statistics')
@login_required
def get_own_stats():
    """Return the report counters and the balance of the logged in user."""
    own_reports = [report for report in storage.backend.list_reports()
                   if report.user == current_user.username]
    user = storage.backend.get_user(current_user.username)
    return jsonify(**report_statistics(own_reports), points=user.points)


@api.route('/storage')
@login_required
def get_storage_mode():
    """Tell whether the cloud database or the local storage is in use."""
    return jsonify(remote=storage.backend.is_remote_backend())
