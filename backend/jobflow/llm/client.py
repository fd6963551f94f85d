from __future__ import annotations
import logging

import anthropic

from jobflow.core.config import settings
from jobflow.llm.errors import LLMEmptyResponse, LLMRequestError

logger = logging.getLogger(__name__)


class ResumeCustomizer:
    """Single-shot Messages API call; no conversation state is kept."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int | None = None,
        client: anthropic.Anthropic | None = None,
    ):
        self.model = model or settings.anthropic_model
        self.max_tokens = max_tokens or settings.anthropic_max_tokens
        self.client = client or anthropic.Anthropic(api_key=api_key or settings.anthropic_api_key)

    def complete(self, system: str, user: str) -> str:
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIError as exc:
            logger.error("Anthropic request failed: %s", exc)
            raise LLMRequestError(str(exc)) from exc

        for block in message.content:
            if getattr(block, "type", None) == "text":
                return block.text

        logger.error("Anthropic response had no text block (stop_reason=%s)", getattr(message, "stop_reason", None))
        raise LLMEmptyResponse([_block_to_dict(block) for block in message.content])


def _block_to_dict(block) -> dict:
    if hasattr(block, "model_dump"):
        return block.model_dump()
    if isinstance(block, dict):
        return block
    return {"type": getattr(block, "type", None)}
