"""Recommendation explanation service with fallback on generation failure."""

import logging
from collections.abc import Sequence

from app.domain.errors import GenerationError
from app.domain.models import CatalogItem, ExplanationRequest, ExplanationResult
from app.ports.llm import LLMPort
from app.prompts.templates import EXPLAIN_RECOMMENDATION, render_explanation_prompt

logger = logging.getLogger(__name__)

FALLBACK_TEMPLATE = (
    "Sorry, we couldn't generate an explanation for {name} at this time. "
    "It seems like a good fit based on items you've previously viewed."
)


def fallback_text(target: CatalogItem) -> str:
    return FALLBACK_TEMPLATE.format(name=target.name)


class ExplainerService:
    """Asks the text-generation provider why a target suits a history."""

    def __init__(self, llm: LLMPort) -> None:
        self._llm = llm

    async def explain(
        self, history: Sequence[CatalogItem], target: CatalogItem
    ) -> ExplanationResult:
        """
        Produce an explanation for recommending ``target``.

        Issues exactly one generation call. Never raises: any provider
        failure yields the fallback text with ``was_generated=False``.
        """
        return await self.explain_request(ExplanationRequest.build(history, target))

    async def explain_request(self, request: ExplanationRequest) -> ExplanationResult:
        prompt = render_explanation_prompt(request.history, request.target)
        try:
            text = await self._llm.generate(
                prompt["system"], prompt["user"], EXPLAIN_RECOMMENDATION.max_tokens
            )
        except GenerationError as e:
            logger.warning(
                "Explanation for product %d fell back: %s", request.target.id, e.reason
            )
            return ExplanationResult(text=fallback_text(request.target), was_generated=False)
        except Exception:
            logger.exception(
                "Unexpected error generating explanation for product %d", request.target.id
            )
            return ExplanationResult(text=fallback_text(request.target), was_generated=False)

        return ExplanationResult(text=text, was_generated=True)
