"""Build the configured text-generation adapter."""

import logging

from app.adapters.llm.gemini import GeminiLLMAdapter
from app.adapters.llm.mock import MockLLMAdapter
from app.adapters.llm.ollama import OllamaLLMAdapter
from app.adapters.llm.openai_adapter import OpenAILLMAdapter
from app.config import LLMProvider, Settings
from app.ports.llm import LLMPort

logger = logging.getLogger(__name__)


def build_llm_adapter(settings: Settings) -> LLMPort:
    """Return the adapter selected by ``settings.llm_provider``."""
    provider = settings.llm_provider
    timeout = settings.llm_timeout_seconds

    if provider is LLMProvider.GEMINI:
        if not settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not set; explanations will use fallback text")
        return GeminiLLMAdapter(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=timeout,
        )
    if provider is LLMProvider.OPENAI:
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set; explanations will use fallback text")
        return OpenAILLMAdapter(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            timeout=timeout,
        )
    if provider is LLMProvider.OLLAMA:
        return OllamaLLMAdapter(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            timeout=timeout,
        )
    return MockLLMAdapter()
