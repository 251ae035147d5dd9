import pytest

from config import TestConfig
from rir_tracker import create_app


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
