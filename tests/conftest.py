import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.research import ResearchService
from app.views.research import get_research_service

SAMPLE_RESULT = {
    "itemName": "Samsung WF45R6100AW",
    "description": "A 4.5 cu. ft. front-load washer.",
    "specifications": ["4.5 cu. ft.", "1,200 RPM"],
    "ageEstimate": {
        "estimatedYear": "2019",
        "estimatedAge": "6 years old (as of 2025)",
        "source": "Model lineup release history",
        "confidence": "medium",
    },
    "originalMSRP": "$899",
    "currentReplacement": {
        "sameModel": [{"retailer": "Home Depot", "price": "$748", "isExactMatch": True}],
        "comparable": [{"retailer": "Lowe's", "price": "$849", "isExactMatch": False}],
    },
    "confidence": {"level": "high", "explanation": "Brand and model given.", "suggestions": []},
    "searchTermUsed": "Samsung WF45R6100AW washer",
}


def text_block(text):
    return SimpleNamespace(type="text", text=text)


class FakeMessages:
    def __init__(self, content=None, exc=None):
        self.content = content or []
        self.exc = exc
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return SimpleNamespace(content=self.content)


class FakeClient:
    def __init__(self, content=None, exc=None):
        self.messages = FakeMessages(content=content, exc=exc)


def fake_client_replying(text):
    return FakeClient(content=[text_block(text)])


@pytest.fixture
def sample_json():
    return json.dumps(SAMPLE_RESULT)


@pytest.fixture
def demo_service():
    return ResearchService(demo_mode=True)


@pytest.fixture
def make_client():
    """TestClient whose research dependency is the given service."""
    def _make(service):
        app.dependency_overrides[get_research_service] = lambda: service
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
