# Pin the environment before proxy_api.config reads it at import time
import os

os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DUMP_ENVIRONMENT", "false")

import pytest

from proxy_api import create_app


@pytest.fixture
def make_app():
    """Build an app for a given config name with optional overrides."""
    def _make(config_name="testing", **overrides):
        return create_app(config_name, overrides or None)
    return _make


@pytest.fixture
def app(make_app):
    return make_app(ALLOWED_ORIGINS=["https://a.com", "", "https://b.com"])


@pytest.fixture
def client(app):
    return app.test_client()
