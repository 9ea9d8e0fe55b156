'''Registration, authentication and profile updates.'''

import pytest

from reportnavi.core.accounts import authenticate, register, update_profile_pic
from reportnavi.core.errors import ValidationError
from reportnavi.models import ReportStatus, UserRole, USERNAME_MAX_LENGTH
from tests.db_fixtures.account import ADMIN_CODE, PASSWORD

pytest_plugins = ['tests.db_fixtures.account', 'tests.db_fixtures.report']


def test_register_member(store):
    user = register(store, 'dave', 'secret', admin_code='wrong', expected_code=ADMIN_CODE)

    assert user.role == UserRole.member
    assert user.points == 0
    assert user.password_hash != 'secret'
    assert store.get_user('dave') == user


def test_register_admin_with_code(store):
    user = register(store, 'erin', 'secret', admin_code=ADMIN_CODE, expected_code=ADMIN_CODE)
    assert user.role == UserRole.admin
    assert user.is_admin


def test_no_admin_without_configured_code(store):
    user = register(store, 'frank', 'secret', admin_code=ADMIN_CODE, expected_code=None)
    assert user.role == UserRole.member


@pytest.mark.parametrize('username,password', [('', 'x'), ('   ', 'x'), ('gina', '')])
def test_register_rejects_blanks(store, username, password):
    with pytest.raises(ValidationError):
        register(store, username, password)
    assert store.list_users() == []


def test_register_rejects_long_username(store):
    with pytest.raises(ValidationError):
        register(store, 'h' * (USERNAME_MAX_LENGTH + 1), 'secret')
    assert store.list_users() == []


def test_usernames_are_unique(store, alice):
    with pytest.raises(ValidationError):
        register(store, 'alice', 'another password')
    assert store.get_user('alice') == alice


def test_racing_registrations_keep_the_first_account(store, monkeypatch):
    '''Both registrations pass the lookup, only the first one is stored.'''
    monkeypatch.setattr(store, 'get_user', lambda _username: None)
    first = register(store, 'ivan', PASSWORD)
    with pytest.raises(ValidationError):
        register(store, 'ivan', 'another password')
    monkeypatch.undo()

    assert store.get_user('ivan') == first
    assert authenticate(store, 'ivan', PASSWORD) == first
    assert authenticate(store, 'ivan', 'another password') is None


def test_authenticate(store, alice):
    assert authenticate(store, 'alice', PASSWORD) == alice
    assert authenticate(store, 'alice', 'wrong') is None
    assert authenticate(store, 'nobody', PASSWORD) is None


def test_profile_pic_keeps_awarded_points(workflow, store, alice, alice_report, bob):
    stale_alice = store.get_user('alice')
    workflow.transition(alice_report, bob, ReportStatus.verified)

    updated = update_profile_pic(store, stale_alice, 'data:image/png;base64,CCCC')

    assert updated.points == 50
    assert store.get_user('alice').points == 50
    assert store.get_user('alice').profile_pic == 'data:image/png;base64,CCCC'


def test_points_are_read_only(alice):
    with pytest.raises(AttributeError):
        alice.points = 1000
