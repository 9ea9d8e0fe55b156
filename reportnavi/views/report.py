"""Views related to the Report model.

Report:
- GET    /reports
- GET    /reports/{report_id}
- POST   /reports
- PATCH  /reports/{report_id}/status
- DELETE /reports/{report_id}
"""

from flask import request
from flask_login import login_required, current_user
from marshmallow import ValidationError

from reportnavi.blueprints import api
from reportnavi.core.helpers import abort
from reportnavi.core.storage import storage
from reportnavi.core.workflow import ReportWorkflow
from reportnavi.schemas import ReportDraftSchema, ReportSchema, StatusChangeSchema

NO_PAYLOAD = ('', 204)


def _get_report_or_404(report_id):
    report = storage.backend.get_report(report_id)
    if report is None:
        abort(404)
    return report


@api.route('/reports')
@login_required
def list_reports():
    """List the reports, most recent first. `?user=` keeps the reports of one user."""
    reports = storage.backend.list_reports()
    if 'user' in request.args:
        reports = [report for report in reports if report.user == request.args['user']]

    out_schema = ReportSchema(many=True)
    return out_schema.jsonify(reports)


@api.route('/reports/<report_id>')
@login_required
def get_report(report_id):
    """Get a single report."""
    out_schema = ReportSchema()
    return out_schema.jsonify(_get_report_or_404(report_id))


@api.route('/reports', methods=['POST'])
@login_required
def submit_report():
    """Submit a new report with its evidence."""
    in_schema = ReportDraftSchema()
    try:
        draft = in_schema.load(request.json)
    except ValidationError as err:
        abort(400, {'message': err.messages})

    report = ReportWorkflow(storage.backend).submit(current_user, draft)

    out_schema = ReportSchema()
    return out_schema.jsonify(report), 201


@api.route('/reports/<report_id>/status', methods=['PATCH'])
@login_required
def change_status(report_id):
    """Verify, decline or resolve a report of another user."""
    in_schema = StatusChangeSchema()
    try:
        data = in_schema.load(request.json)
    except ValidationError as err:
        abort(400, {'message': err.messages})

    report = _get_report_or_404(report_id)
    report = ReportWorkflow(storage.backend).transition(report, current_user, data['status'])

    out_schema = ReportSchema()
    return out_schema.jsonify(report)


@api.route('/reports/<report_id>', methods=['DELETE'])
@login_required
def delete_report(report_id):
    """Delete an own pending report."""
    report = _get_report_or_404(report_id)
    ReportWorkflow(storage.backend).remove(report, current_user)
    return NO_PAYLOAD
