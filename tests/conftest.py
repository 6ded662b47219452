"""
Conftest.py - global pytest configuration.

Fixtures:
- Flask app in test mode (CSRF and rate limiting off)
- HTTP test clients: anonymous, Admin and ContentCreator
- fake_api: the external REST API, patched in at requests.Session.request
"""

import os

import pytest
import requests

# Test environment must be in place BEFORE any project import
os.environ["FLASK_ENV"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-do-not-use-in-production"
os.environ.pop("SENTRY_DSN", None)

from tests.fixtures import ADMIN_PROFILE, API_URL, CREATOR_PROFILE, FakeApi, sign_in  # noqa: E402


@pytest.fixture(scope="session")
def app(tmp_path_factory):
    """Creates the Flask application for tests."""
    from backend.estg_portal import create_app

    test_config = {
        "TESTING": True,
        "SECRET_KEY": "test-secret-key-do-not-use-in-production",
        "API_URL": API_URL,
        "API_TIMEOUT": 5,
        "WTF_CSRF_ENABLED": False,  # CSRF off in tests
        "RATELIMIT_ENABLED": False,
        "SENTRY_DSN": None,
        "LOG_DIR": str(tmp_path_factory.mktemp("logs")),
        "LOG_ROTATION_ENABLED": False,
        "SERVER_NAME": "localhost",
    }

    app = create_app(test_config=test_config)
    yield app


@pytest.fixture
def fake_api(monkeypatch):
    """Replaces every outgoing HTTP call with the FakeApi router."""
    fake = FakeApi()

    def fake_request(session, method, url, **kwargs):
        return fake.dispatch(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, "request", fake_request)
    return fake


@pytest.fixture
def client(app, fake_api):
    """Anonymous HTTP test client."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def admin_client(client, fake_api):
    """Test client holding an API session for an Admin."""
    return sign_in(client, fake_api, ADMIN_PROFILE, "admin")


@pytest.fixture
def creator_client(client, fake_api):
    """Test client holding an API session for a ContentCreator."""
    return sign_in(client, fake_api, CREATOR_PROFILE, "creator")


@pytest.fixture
def request_ctx(app, fake_api):
    """Request context for service-level tests (session and g available)."""
    with app.test_request_context("/"):
        yield app
