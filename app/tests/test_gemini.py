import asyncio
from types import SimpleNamespace

import pytest

import core.gemini as gemini
from core.errors import UpstreamError
from core.gemini import GeminiClient


class TextlessResponse:
    candidates = [object()]
    prompt_feedback = None

    @property
    def text(self):
        raise ValueError("response has no valid parts")


def _patch_model(monkeypatch, generate):
    class StubModel:
        def __init__(self, name):
            self.name = name

        async def generate_content_async(self, instruction):
            return generate(instruction)

    monkeypatch.setattr(gemini.genai, "configure", lambda **kwargs: None)
    monkeypatch.setattr(gemini.genai, "GenerativeModel", StubModel)
    return GeminiClient(api_key="test-key", default_model="gemini-2.0-flash")


def test_returns_model_text(monkeypatch):
    client = _patch_model(monkeypatch, lambda instruction: SimpleNamespace(
        candidates=[object()], prompt_feedback=None, text=f"echo: {instruction}",
    ))
    assert asyncio.run(client.generate("hello")) == "echo: hello"


def test_sdk_exception_is_chained(monkeypatch):
    def boom(instruction):
        raise ConnectionError("network down")

    client = _patch_model(monkeypatch, boom)
    with pytest.raises(UpstreamError) as exc:
        asyncio.run(client.generate("hello", "gemini-1.5-pro"))
    assert exc.value.model_name == "gemini-1.5-pro"
    assert isinstance(exc.value.__cause__, ConnectionError)


def test_blocked_response(monkeypatch):
    client = _patch_model(monkeypatch, lambda instruction: SimpleNamespace(
        candidates=[], prompt_feedback=SimpleNamespace(block_reason="SAFETY"),
    ))
    with pytest.raises(UpstreamError, match="SAFETY") as exc:
        asyncio.run(client.generate("hello"))
    assert exc.value.model_name == "gemini-2.0-flash"


def test_missing_text_is_chained(monkeypatch):
    client = _patch_model(monkeypatch, lambda instruction: TextlessResponse())
    with pytest.raises(UpstreamError) as exc:
        asyncio.run(client.generate("hello"))
    assert exc.value.model_name == "gemini-2.0-flash"
    assert isinstance(exc.value.__cause__, ValueError)
