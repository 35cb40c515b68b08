import os

import pytest

os.environ.setdefault("RATELIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FILE", "")


@pytest.fixture
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
