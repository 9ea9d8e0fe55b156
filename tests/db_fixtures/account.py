'''Fixtures creating user accounts.'''

from typing import List, Tuple

import pytest
from faker import Faker
from flask.testing import FlaskClient

from reportnavi.core.accounts import register
from reportnavi.core.storage import StoreBase
from reportnavi.models import User

PASSWORD = 'swiper-no-swiping'
ADMIN_CODE = '1234'


def login(client: FlaskClient, user: User, password: str = PASSWORD):
    '''Log in a particular user for the current instance of the test client.'''
    response = client.post('/login', json={'username': user.username, 'password': password})
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def alice(store: StoreBase) -> User:
    '''A regular member who submits reports.'''
    return register(store, 'alice', PASSWORD)


@pytest.fixture
def bob(store: StoreBase) -> User:
    '''An administrator who reviews reports.'''
    return register(store, 'bob', PASSWORD, admin_code=ADMIN_CODE, expected_code=ADMIN_CODE)


@pytest.fixture
def members(store: StoreBase, faker: Faker) -> List[User]:
    '''Generate some members.'''
    return [register(store, faker.unique.user_name(), PASSWORD) for _ in range(3)]


@pytest.fixture
def logged_in_alice(client: FlaskClient, alice: User) -> Tuple[User, str]:
    '''Log in as alice and return the user with the CSRF token.'''
    body = login(client, alice)
    return alice, body['csrfToken']


@pytest.fixture
def logged_in_bob(client: FlaskClient, bob: User) -> Tuple[User, str]:
    '''Log in as bob and return the user with the CSRF token.'''
    body = login(client, bob)
    return bob, body['csrfToken']
