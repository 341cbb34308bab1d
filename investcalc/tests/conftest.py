from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.config import Config


@pytest.fixture()
def app_config() -> Config:
    return Config(max_investments=3)


@pytest.fixture()
def client(app_config: Config) -> FlaskClient:
    flask_app = create_app(app_config)
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as test_client:
        yield test_client
