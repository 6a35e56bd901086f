import asyncio
import logging

from app.ports.llm import LLMPort
from app.prompts.templates import estimate_tokens

logger = logging.getLogger(__name__)


class MockLLMAdapter(LLMPort):
    """
    Mock LLM adapter for local development and tests without API access.

    Returns a deterministic explanation built from the prompt itself.
    Latency can be simulated for concurrency testing.
    """

    def __init__(self, latency: float = 0.0) -> None:
        self._latency = latency

    async def generate(self, system: str, user: str, max_tokens: int) -> str:
        """Return a mock explanation."""
        if self._latency:
            await asyncio.sleep(self._latency)
        logger.info("MockLLM: generate called (%d estimated tokens)", estimate_tokens(user))

        bullets = [line for line in user.splitlines() if line.startswith("- ")]
        target = bullets[-1][2:].split(" (", 1)[0] if bullets else "this product"
        return (
            f"Because you liked the products you've been browsing, we think {target} "
            "is a great next pick for you. It shares the style and purpose of the "
            "items you've previously viewed."
        )
