from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investsim.app import create_app
from investsim.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(CURRENCY="BRL", REPORT_TITLE="Test Report")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
