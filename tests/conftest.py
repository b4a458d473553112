"""Test configuration and fixtures."""

import pytest
import tempfile
import os
from pathlib import Path

from buildmyhome import create_app
from buildmyhome.catalog_seed import seed_catalog
from buildmyhome.extensions import db as _db


@pytest.fixture
def app_overrides():
    """Per-test config overrides; override this fixture to customise."""
    return {}


@pytest.fixture
def app(app_overrides):
    """Create application for testing."""
    db_fd, db_path = tempfile.mkstemp(suffix='.db')
    os.close(db_fd)

    overrides = {'SQLALCHEMY_DATABASE_URI': f'sqlite:///{db_path}'}
    overrides.update(app_overrides)
    app = create_app('testing', overrides)

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()
        _db.engine.dispose()

    Path(db_path).unlink(missing_ok=True)


@pytest.fixture
def client(app):
    """Test client for making requests."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """CLI test runner."""
    return app.test_cli_runner()


@pytest.fixture
def db(app):
    """Database fixture."""
    return _db


@pytest.fixture
def catalog(app):
    """Sample packages, materials and projects."""
    return seed_catalog()


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=''):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def fake_response():
    return FakeResponse
