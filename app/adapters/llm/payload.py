"""Helpers for pulling generated text out of provider response bodies."""

from typing import Any

from app.domain.errors import GenerationError


def extract_text(body: Any, path: tuple[str | int, ...], provider: str) -> str:
    """
    Walk ``path`` through a decoded JSON body and return the text at the end.

    Raises GenerationError if any step is missing or the text is blank.
    """
    node = body
    for step in path:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError):
            raise GenerationError(
                f"{provider} response missing field at {'.'.join(map(str, path))}"
            ) from None
    if not isinstance(node, str) or not node.strip():
        raise GenerationError(f"{provider} response contained no text")
    return node.strip()
