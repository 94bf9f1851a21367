"""Shared fixtures: an in-memory app, its test client and the tracker facade."""

import pytest

from jobapps import create_app
from jobapps.extensions import db
from jobapps.services.store import get_store
from jobapps.services.tracker import get_tracker


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return get_store()


@pytest.fixture
def tracker(app):
    return get_tracker()
