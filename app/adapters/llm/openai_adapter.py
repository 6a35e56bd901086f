import logging

import httpx
from openai import AsyncOpenAI, OpenAIError

from app.domain.errors import GenerationError
from app.ports.llm import LLMPort

logger = logging.getLogger(__name__)


class OpenAILLMAdapter(LLMPort):
    """LLM adapter using OpenAI API (GPT-4o, GPT-4o-mini, etc.)."""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client: AsyncOpenAI | None = None
        if api_key:
            self._client = AsyncOpenAI(
                api_key=api_key,
                timeout=timeout,
                max_retries=0,
                http_client=http_client,
            )
        self._model = model

    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        """Send a chat completion request to OpenAI."""
        if self._client is None:
            raise GenerationError("OpenAI API key is not configured")

        logger.info("OpenAI request: model=%s, max_tokens=%d", self._model, max_tokens)
        try:
            resp = await self._client.chat.completions.create(
                model=self._model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                max_tokens=max_tokens,
                temperature=0.7,
            )
        except OpenAIError as e:
            raise GenerationError(f"OpenAI request failed: {type(e).__name__}") from e

        if not resp.choices:
            raise GenerationError("OpenAI response contained no choices")
        result = (resp.choices[0].message.content or "").strip()
        if not result:
            raise GenerationError("OpenAI response contained no text")
        logger.info("OpenAI response: %d chars", len(result))
        return result
