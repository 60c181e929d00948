from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from asset_planner.app import create_app
from asset_planner.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(max_simulations=50, max_years=60, random_seed=None)


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    flask_app = create_app(settings)
    with flask_app.test_client() as test_client:
        yield test_client
