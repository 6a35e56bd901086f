"""Google Gemini adapter over the public ``generateContent`` REST endpoint."""

import logging

import httpx

from app.adapters.llm.payload import extract_text
from app.domain.errors import GenerationError
from app.ports.llm import LLMPort

logger = logging.getLogger(__name__)

TEXT_PATH = ("candidates", 0, "content", "parts", 0, "text")


class GeminiLLMAdapter(LLMPort):
    """LLM adapter using the Gemini API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        """Send a single generateContent request to Gemini."""
        if not self._api_key:
            raise GenerationError("Gemini API key is not configured")

        payload = {
            "system_instruction": {"parts": [{"text": system}]},
            "contents": [{"role": "user", "parts": [{"text": user}]}],
            "generationConfig": {"maxOutputTokens": max_tokens},
        }
        url = f"{self._base_url}/models/{self._model}:generateContent"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                logger.info("Gemini request: model=%s, max_tokens=%d", self._model, max_tokens)
                resp = await client.post(
                    url, json=payload, headers={"x-goog-api-key": self._api_key}
                )
                resp.raise_for_status()
                body = resp.json()
        except httpx.TimeoutException as e:
            raise GenerationError(f"Gemini request timed out after {self._timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"Gemini returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Gemini request failed: {e!r}") from e
        except ValueError as e:
            raise GenerationError("Gemini returned a non-JSON body") from e

        result = extract_text(body, TEXT_PATH, "Gemini")
        logger.info("Gemini response: %d chars", len(result))
        return result
