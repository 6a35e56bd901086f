"""
Versioned prompt templates for recommendation explanations.

Templates are immutable and provider-agnostic: the same rendered prompt is
sent to Gemini, OpenAI or Ollama. Rendering is deterministic for a given
history and target, and long histories are truncated here rather than in the
adapters.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from app.domain.models import CatalogItem


# ── Token Estimation ─────────────────────────────────────────────
# Rough estimate: 1 token ≈ 4 characters for English text.

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate token count from character length."""
    return len(text) // CHARS_PER_TOKEN


def truncate_to_tokens(text: str, max_tokens: int) -> str:
    """
    Truncate text to approximately max_tokens, keeping the last whole lines.

    History is listed in click order, so the most recent items survive.
    """
    max_chars = max_tokens * CHARS_PER_TOKEN
    if len(text) <= max_chars:
        return text
    truncated = text[-max_chars:]
    if text[-max_chars - 1] != "\n":
        truncated = truncated[truncated.find("\n") + 1:]
    return "- ... (earlier items omitted)\n" + truncated


# ── Prompt Template ──────────────────────────────────────────────

@dataclass(frozen=True)
class PromptTemplate:
    """
    Immutable prompt template with system persona and user message.

    Attributes:
        name:              Unique identifier for logging and tracking.
        version:           Semantic version for prompt iteration tracking.
        system:            System message defining the LLM persona and constraints.
        user_template:     User message template with {variable} placeholders.
        max_tokens:        Maximum output tokens requested from the LLM.
        input_token_limit: Maximum tokens for the truncatable content field.
        tags:              Metadata tags for categorization.
    """

    name: str
    version: str
    system: str
    user_template: str
    max_tokens: int = 256
    input_token_limit: int = 2000
    tags: tuple[str, ...] = field(default_factory=tuple)

    def render(self, **kwargs: str) -> dict[str, str]:
        """Render template with variables, returning system + user messages."""
        return {
            "system": self.system,
            "user": self.user_template.format(**kwargs),
        }

    def render_with_truncation(self, content_key: str, **kwargs: str) -> dict[str, str]:
        """Render template, truncating the specified content field to fit token limits."""
        if content_key in kwargs:
            kwargs[content_key] = truncate_to_tokens(
                kwargs[content_key], self.input_token_limit
            )
        return self.render(**kwargs)


# ── Recommendation Explanation Prompt ────────────────────────────

EXPLAIN_RECOMMENDATION = PromptTemplate(
    name="explain_recommendation",
    version="1.0.0",
    system=(
        "You are a friendly shopping assistant for an online store. "
        "You explain product recommendations to shoppers in plain language."
    ),
    user_template=(
        "A user has shown interest in the following products:\n"
        "{history_text}\n\n"
        "Based on this history, we are recommending this product:\n"
        "{target_text}\n\n"
        "Please provide a short, friendly, and concise explanation (2-3 sentences) "
        "for the user about why this is a good recommendation for them. "
        'Speak directly to the user (e.g., "Because you liked...").'
    ),
    max_tokens=256,
    input_token_limit=2000,
    tags=("recommendation", "explanation"),
)


# ── Rendering Helpers ────────────────────────────────────────────

def describe_item(item: CatalogItem) -> str:
    """Format one item as a prompt bullet line."""
    return f"- {item.name} (Category: {item.category}, Tags: {', '.join(item.sorted_tags())})"


def render_explanation_prompt(
    history: Sequence[CatalogItem],
    target: CatalogItem,
) -> dict[str, str]:
    """
    Render the recommendation explanation prompt.

    Args:
        history: Viewed items in click order.
        target:  The recommended item to justify.

    Returns:
        Dict with 'system' and 'user' keys ready for any LLM adapter.
    """
    history_text = "\n".join(describe_item(item) for item in history) or "- (no items)"
    return EXPLAIN_RECOMMENDATION.render_with_truncation(
        content_key="history_text",
        history_text=history_text,
        target_text=describe_item(target),
    )


# ── Prompt Registry ──────────────────────────────────────────────

PROMPT_REGISTRY: dict[str, PromptTemplate] = {
    EXPLAIN_RECOMMENDATION.name: EXPLAIN_RECOMMENDATION,
}


def get_prompt(name: str) -> PromptTemplate:
    """Retrieve a prompt template by name. Raises KeyError if not found."""
    if name not in PROMPT_REGISTRY:
        raise KeyError(
            f"Prompt '{name}' not found. Available: {list(PROMPT_REGISTRY.keys())}"
        )
    return PROMPT_REGISTRY[name]
