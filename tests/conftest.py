import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ["ENVIRONMENT"] = "test"
os.environ["DEFAULT_TIMEZONE"] = "UTC"

from chatlyzer.core.config import get_settings
from chatlyzer.main import create_app

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture()
def fixture_text():
    return read_fixture


@pytest.fixture()
def settings_override(monkeypatch):
    def _override(**values):
        settings = get_settings()
        for key, value in values.items():
            monkeypatch.setattr(settings, key, value)
        return settings

    return _override


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
