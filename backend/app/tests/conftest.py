import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_llm_client
from app.core.config import Settings
from app.main import create_app


class FakeLLM:
    """Stands in for LLMClient: records prompts and returns scripted text."""

    def __init__(self, responses: list[str] | None = None, fail_on_call: int | None = None):
        self.calls: list[dict] = []
        self._responses = list(responses or [])
        self.fail_on_call = fail_on_call

    async def generate_text(self, system_prompt: str, user_prompt: str, *, temperature=None) -> str:
        self.calls.append({"system_prompt": system_prompt, "user_prompt": user_prompt})
        if self.fail_on_call == len(self.calls):
            raise RuntimeError("provider unavailable")
        if self._responses:
            return self._responses.pop(0)
        return f"Mocked AI response {len(self.calls)}"


@pytest.fixture
def make_llm():
    return FakeLLM


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def make_client(fake_llm):
    def _make(llm=None, **overrides) -> TestClient:
        values = {"ENVIRONMENT": "test", "RATE_LIMIT_MAX": 1000, **overrides}
        app = create_app(Settings(**values))
        app.dependency_overrides[get_llm_client] = lambda: llm or fake_llm
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
