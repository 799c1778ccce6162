import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest
from fastapi.testclient import TestClient

from core.config import PROJECT_ROOT, Settings
from core.errors import UpstreamError
from main import create_app
from tests.fakes import FakeGemini


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="test-key",
        rate_limit_points=1000,
        rate_limit_duration=60,
        static_dir=PROJECT_ROOT / "static",
    )


@pytest.fixture
def fake_gemini():
    return FakeGemini()


@pytest.fixture
def make_client(settings):
    def _make(model_client=None, **overrides):
        for key, value in overrides.items():
            setattr(settings, key, value)
        app = create_app(settings, model_client=model_client or FakeGemini())
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, fake_gemini):
    return make_client(fake_gemini)


@pytest.fixture
def failing_gemini():
    return FakeGemini(reply=UpstreamError("quota exceeded", model_name="gemini-2.0-flash"))
