import logging

import httpx

from app.adapters.llm.payload import extract_text
from app.domain.errors import GenerationError
from app.ports.llm import LLMPort

logger = logging.getLogger(__name__)


class OllamaLLMAdapter(LLMPort):
    """LLM adapter using a local Ollama instance."""

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._timeout = timeout
        self._transport = transport

    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        """Send a chat completion request to Ollama."""
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "stream": False,
            "options": {"num_predict": max_tokens},
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                logger.info("Ollama request: model=%s, max_tokens=%d", self._model, max_tokens)
                resp = await client.post(f"{self._base_url}/api/chat", json=payload)
                resp.raise_for_status()
                body = resp.json()
        except httpx.TimeoutException as e:
            raise GenerationError(f"Ollama request timed out after {self._timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise GenerationError(f"Ollama returned status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Ollama request failed: {e!r}") from e
        except ValueError as e:
            raise GenerationError("Ollama returned a non-JSON body") from e

        result = extract_text(body, ("message", "content"), "Ollama")
        logger.info("Ollama response: %d chars", len(result))
        return result
