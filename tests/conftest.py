'''Fixtures defined for all tests.'''

from typing import Generator

from flask import Flask
from flask.testing import FlaskClient
import pytest

from reportnavi.app import create_app
from reportnavi.core.storage import StoreBase
from reportnavi.core.workflow import ReportWorkflow
from tests.json_capable_test_client import JsonCapableTestClient

backends = [
    ('remote', 'remote'),
    ('embedded', 'embedded'),
]
params, ids = zip(*backends)


@pytest.fixture(params=params, ids=ids)
def app(request: pytest.FixtureRequest, tmp_path, monkeypatch) -> Generator[Flask, None, None]:
    '''Create a Flask app for each of the storage backends.
       The remote one runs on an in-memory SQLite database.'''
    monkeypatch.setenv('STORAGE_BACKEND', request.param)
    monkeypatch.setenv('EMBEDDED_DB_PATH', str(tmp_path / 'reportnavi_local.db'))

    app = create_app(config='config/test.py')
    app.test_client_class = JsonCapableTestClient
    with app.app_context():
        yield app


@pytest.fixture
def client(app: Flask) -> Generator[FlaskClient, None, None]:
    '''Spin up a test client for the current Flask app.'''
    with app.test_client() as client:
        yield client


@pytest.fixture
def store(app: Flask) -> StoreBase:
    '''The storage backend selected for the current app.'''
    return app.extensions['storage']


@pytest.fixture
def workflow(store: StoreBase) -> ReportWorkflow:
    '''The report workflow on top of the current backend.'''
    return ReportWorkflow(store)
