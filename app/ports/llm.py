"""LLM port: abstract interface for text-generation providers."""

from abc import ABC, abstractmethod


class LLMPort(ABC):
    """Abstraction for a single-prompt text-generation service."""

    @abstractmethod
    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        """
        Issue one generation request and return the generated text.

        Implementations must return non-empty text or raise GenerationError.
        They never retry.
        """
        ...
