from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.adapters.catalog.static import DEFAULT_PRODUCTS, StaticCatalogAdapter
from app.adapters.llm.mock import MockLLMAdapter
from app.api.dependencies import get_catalog, get_llm
from app.domain.models import CatalogItem
from app.main import app

BASE = "http://test"


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RecordingLLM(MockLLMAdapter):
    """Mock adapter that keeps every prompt it receives."""

    def __init__(self, latency: float = 0.0) -> None:
        super().__init__(latency)
        self.calls: list[dict[str, str]] = []

    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        self.calls.append({"system": system, "user": user})
        return await super().generate(system, user, max_tokens)


@pytest.fixture
def catalog() -> StaticCatalogAdapter:
    return StaticCatalogAdapter(DEFAULT_PRODUCTS)


@pytest.fixture
def small_catalog() -> list[CatalogItem]:
    return [
        CatalogItem(1, "Alpha", 10.0, "X", frozenset({"a", "b"})),
        CatalogItem(2, "Beta", 12.0, "Y", frozenset({"b", "c"})),
        CatalogItem(3, "Gamma", 8.0, "X", frozenset({"d"})),
    ]


@pytest.fixture
def mock_llm() -> RecordingLLM:
    return RecordingLLM()


@pytest.fixture
async def client(
    catalog: StaticCatalogAdapter, mock_llm: RecordingLLM
) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_llm] = lambda: mock_llm
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    """A provider endpoint that always answers HTTP 500."""
    return httpx.MockTransport(
        lambda request: httpx.Response(500, json={"error": {"message": "internal"}})
    )
