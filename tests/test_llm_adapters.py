"""Provider adapter tests against in-process mock transports."""

import json

import httpx
import pytest

from app.adapters.llm.factory import build_llm_adapter
from app.adapters.llm.gemini import GeminiLLMAdapter
from app.adapters.llm.mock import MockLLMAdapter
from app.adapters.llm.ollama import OllamaLLMAdapter
from app.adapters.llm.openai_adapter import OpenAILLMAdapter
from app.config import LLMProvider, Settings
from app.domain.errors import GenerationError
from tests.conftest import gemini_body


def gemini(handler, api_key: str = "test-key") -> GeminiLLMAdapter:
    return GeminiLLMAdapter(
        api_key=api_key,
        model="gemini-test",
        base_url="https://gemini.test/v1beta",
        transport=httpx.MockTransport(handler),
    )


# ── Gemini ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_gemini_success():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=gemini_body("  Because you liked lamps.  "))

    text = await gemini(handler).generate("sys", "user prompt", 128)

    assert text == "Because you liked lamps."
    assert len(seen) == 1
    request = seen[0]
    assert request.url.path == "/v1beta/models/gemini-test:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    payload = json.loads(request.content)
    assert payload["contents"][0]["parts"][0]["text"] == "user prompt"
    assert payload["system_instruction"]["parts"][0]["text"] == "sys"
    assert payload["generationConfig"]["maxOutputTokens"] == 128


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"error": "boom"}),
        httpx.Response(403, json={"error": "forbidden"}),
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, json=gemini_body("   ")),
        httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": 42}]}}]}),
    ],
)
async def test_gemini_bad_responses_raise_generation_error(response):
    adapter = gemini(lambda request: response)
    with pytest.raises(GenerationError):
        await adapter.generate("sys", "user", 64)


@pytest.mark.asyncio
async def test_gemini_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(GenerationError, match="timed out"):
        await gemini(handler).generate("sys", "user", 64)


@pytest.mark.asyncio
async def test_gemini_unreachable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GenerationError, match="request failed"):
        await gemini(handler).generate("sys", "user", 64)


@pytest.mark.asyncio
async def test_gemini_without_key_never_calls_out():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=gemini_body("unused"))

    with pytest.raises(GenerationError, match="not configured"):
        await gemini(handler, api_key="").generate("sys", "user", 64)
    assert calls == []


# ── Ollama ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_ollama_success():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/chat"
        payload = json.loads(request.content)
        assert payload["stream"] is False
        assert payload["messages"][1]["content"] == "user"
        return httpx.Response(200, json={"message": {"role": "assistant", "content": "Nice pick."}})

    adapter = OllamaLLMAdapter(
        base_url="http://ollama.test/", model="llama", transport=httpx.MockTransport(handler)
    )
    assert await adapter.generate("sys", "user", 64) == "Nice pick."


@pytest.mark.asyncio
async def test_ollama_error_status():
    adapter = OllamaLLMAdapter(
        base_url="http://ollama.test",
        model="llama",
        transport=httpx.MockTransport(lambda request: httpx.Response(502)),
    )
    with pytest.raises(GenerationError, match="502"):
        await adapter.generate("sys", "user", 64)


# ── OpenAI ─────────────────────────────────────────


def openai_completion(content: str | None) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "gpt-test",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def openai(handler) -> OpenAILLMAdapter:
    return OpenAILLMAdapter(
        api_key="sk-test",
        model="gpt-test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_openai_success():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/chat/completions")
        return httpx.Response(200, json=openai_completion("You'll love it."))

    assert await openai(handler).generate("sys", "user", 64) == "You'll love it."


@pytest.mark.asyncio
async def test_openai_server_error_not_retried():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"error": {"message": "boom"}})

    with pytest.raises(GenerationError):
        await openai(handler).generate("sys", "user", 64)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_openai_empty_content():
    adapter = openai(lambda request: httpx.Response(200, json=openai_completion(None)))
    with pytest.raises(GenerationError, match="no text"):
        await adapter.generate("sys", "user", 64)


@pytest.mark.asyncio
async def test_openai_without_key():
    adapter = OpenAILLMAdapter(api_key="", model="gpt-test")
    with pytest.raises(GenerationError, match="not configured"):
        await adapter.generate("sys", "user", 64)


# ── Mock & factory ─────────────────────────────────


@pytest.mark.asyncio
async def test_mock_adapter_names_target():
    llm = MockLLMAdapter()
    user = "- Yoga Mat (Category: Sports, Tags: yoga)\n\n- Running Shoes (Category: Apparel, Tags: running)"
    text = await llm.generate("sys", user, 64)
    assert "Running Shoes" in text


@pytest.mark.asyncio
async def test_mock_adapter_keeps_no_per_call_state():
    llm = MockLLMAdapter()
    before = dict(vars(llm))
    for _ in range(3):
        await llm.generate("sys", "- Lamp (Category: Home, Tags: office)", 64)
    assert vars(llm) == before


@pytest.mark.parametrize(
    "provider, expected",
    [
        (LLMProvider.GEMINI, GeminiLLMAdapter),
        (LLMProvider.OPENAI, OpenAILLMAdapter),
        (LLMProvider.OLLAMA, OllamaLLMAdapter),
        (LLMProvider.MOCK, MockLLMAdapter),
    ],
)
def test_factory_selects_provider(provider, expected):
    settings = Settings(llm_provider=provider, gemini_api_key="", openai_api_key="")
    assert isinstance(build_llm_adapter(settings), expected)
