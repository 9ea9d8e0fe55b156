'''Fixtures and factories for reports.'''

import uuid

import pytest
from faker import Faker

from reportnavi.core.storage import StoreBase
from reportnavi.core.workflow import ReportWorkflow
from reportnavi.models import Activity, ActivityType, Report, ReportDraft, ReportFile, ReportStatus, User

IMAGE = ReportFile(name='pothole.jpg', type='image/jpeg', url='data:image/jpeg;base64,AAAA')
VIDEO = ReportFile(name='flood.mp4', type='video/mp4', url='data:video/mp4;base64,BBBB')


def make_report(faker: Faker, owner: str, date: str, **overrides) -> Report:
    '''Build a report record without going through the workflow.'''
    fields = dict(
        id=uuid.uuid4().hex[:16],
        user=owner,
        category='Road',
        title=faker.sentence(nb_words=4),
        description=faker.paragraph(),
        location=f'https://www.google.com/maps?q={faker.latitude()},{faker.longitude()}',
        date=date,
        status=ReportStatus.pending,
        files=[IMAGE],
        thumbnail=IMAGE.url,
    )
    fields.update(overrides)
    return Report(**fields)


def make_activity(username: str, date: str, kind: ActivityType = ActivityType.submit,
                  points_change: int = 0) -> Activity:
    '''Build a ledger entry without going through the ledger.'''
    return Activity(id=uuid.uuid4().hex,
                    username=username,
                    type=kind,
                    target_title='Broken streetlight',
                    points_change=points_change,
                    date=date)


def make_draft(faker: Faker, **overrides) -> ReportDraft:
    '''Build what a user would fill in the submission form.'''
    fields = dict(
        category='Road',
        title=faker.sentence(nb_words=4),
        description=faker.paragraph(),
        location=faker.street_address(),
        files=[IMAGE],
    )
    fields.update(overrides)
    return ReportDraft(**fields)


@pytest.fixture
def alice_report(workflow: ReportWorkflow, alice: User, faker: Faker) -> Report:
    '''A pending report submitted by alice.'''
    return workflow.submit(alice, make_draft(faker))


@pytest.fixture
def verified_report(workflow: ReportWorkflow, alice_report: Report, bob: User) -> Report:
    '''Alice's report, verified by bob.'''
    return workflow.transition(alice_report, bob, ReportStatus.verified)
