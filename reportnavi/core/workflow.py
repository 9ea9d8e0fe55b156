"""The report lifecycle.

A report starts as Pending and may then be
- verified (which awards points to its owner) and later resolved,
- or declined.
Nobody may change the status of their own report, and only the owner may
delete a report while it is still pending.

Each operation is a short ordered sequence of storage calls. The remote backend
runs them in one transaction, the embedded one does not, so a failure halfway
through can leave the status changed without the matching ledger entry or award."""

from dataclasses import replace
from datetime import datetime
import logging
import secrets

from reportnavi.core.errors import (
    AuthorizationError,
    InvalidStateError,
    InvalidTransitionError,
    ValidationError,
)
from reportnavi.core.ledger import ActivityLedger
from reportnavi.core.storage import StoreBase
from reportnavi.core.timezone import tz_aware_now
from reportnavi.models import (
    ActivityType,
    CATEGORY_MAX_LENGTH,
    Report,
    ReportDraft,
    ReportStatus,
    TITLE_MAX_LENGTH,
    User,
)

log = logging.getLogger(__name__)

VERIFY_AWARD = 50
VIDEO_PLACEHOLDER = ('https://images.unsplash.com/photo-1516280440614-37939bbacd81'
                     '?q=80&w=500&auto=format&fit=crop')

STATUS_TO_ACTIVITY = {
    ReportStatus.verified: ActivityType.verify,
    ReportStatus.resolved: ActivityType.resolve,
    ReportStatus.declined: ActivityType.decline,
}


def new_report_id(moment: datetime) -> str:
    """Return an ID that sorts by creation time, with a random tail against collisions."""
    millis = int(moment.timestamp() * 1000)
    return f'{millis:013d}-{secrets.token_hex(3)}'


def pick_thumbnail(draft: ReportDraft) -> str:
    """Use the first image as the thumbnail, or a placeholder if there are only videos."""
    return next((file.url for file in draft.files if file.is_image), VIDEO_PLACEHOLDER)


class ReportWorkflow:
    """Enforces the status transitions of reports and their side effects."""

    def __init__(self, store: StoreBase):
        self.store = store
        self.ledger = ActivityLedger(store)

    def submit(self, owner: User, draft: ReportDraft) -> Report:
        """Create a pending report from the draft and log its submission."""
        if not draft.category or draft.category.isspace():
            raise ValidationError('Please select a category.')
        if len(draft.category) > CATEGORY_MAX_LENGTH:
            raise ValidationError(f'The category is longer than {CATEGORY_MAX_LENGTH} characters.')
        if len(draft.title) > TITLE_MAX_LENGTH:
            raise ValidationError(f'The title is longer than {TITLE_MAX_LENGTH} characters.')
        if not draft.files:
            raise ValidationError('Please upload at least one photo or video as evidence.')

        moment = tz_aware_now()
        report = Report(id=new_report_id(moment),
                        user=owner.username,
                        category=draft.category,
                        title=draft.title,
                        description=draft.description,
                        location=draft.location,
                        date=moment.isoformat(timespec='microseconds'),
                        status=ReportStatus.pending,
                        files=list(draft.files),
                        thumbnail=pick_thumbnail(draft))

        with self.store.atomic():
            self.store.create_report(report)
            self.ledger.record(owner.username, ActivityType.submit, report.title)

        log.info(f'{owner.username} submitted report {report.id} ({report.category})')
        return report

    def transition(self, report: Report, acting_user: User, target_status: ReportStatus) -> Report:
        """Move the report to the target status on behalf of the acting user.

        Returns a copy of the report with its new status."""
        if acting_user.username == report.user:
            raise AuthorizationError('You cannot verify or update your own reports.')

        if not report.can_become(target_status):
            raise InvalidTransitionError(f'A report cannot go from {report.status.value} '
                                         f'to {target_status.value}.')

        owner = None
        if target_status == ReportStatus.verified:
            owner = self.store.get_user(report.user)
            if owner is None:
                raise InvalidStateError(f'The owner of the report, {report.user}, does not exist.')

        points = VERIFY_AWARD if owner is not None else 0
        with self.store.atomic():
            self.store.update_report(report.id, status=target_status)
            if owner is not None:
                owner._award(points)  # pylint: disable=protected-access
                self.store.upsert_user(owner)
            self.ledger.record(report.user, STATUS_TO_ACTIVITY[target_status],
                               report.title, points)

        log.info(f'{acting_user.username} moved report {report.id} '
                 f'from {report.status.value} to {target_status.value}')
        return replace(report, status=target_status)

    def remove(self, report: Report, acting_user: User):
        """Delete a pending report on behalf of its owner."""
        if acting_user.username != report.user:
            raise AuthorizationError('Only the owner may delete a report.')

        if report.status != ReportStatus.pending:
            raise InvalidStateError('Only pending reports may be deleted.')

        with self.store.atomic():
            self.ledger.record(report.user, ActivityType.delete, report.title)
            self.store.delete_report(report.id)

        log.info(f'{acting_user.username} deleted report {report.id}')
