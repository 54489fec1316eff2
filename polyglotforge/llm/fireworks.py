"""Fireworks adapter: OpenAI-compatible endpoint, prompt-only JSON."""

from __future__ import annotations

import httpx
import instructor

from polyglotforge.llm.models import LLMConfig
from polyglotforge.llm.openai_adapter import OpenAIProvider

FIREWORKS_BASE_URL = "https://api.fireworks.ai/inference/v1"
DOBBY_MODEL = "accounts/sentientfoundation/models/dobby-unhinged-llama-3-3-70b-new"


class FireworksProvider(OpenAIProvider):
    """Fireworks inference API through the OpenAI SDK.

    Fireworks-hosted fine-tunes do not reliably honour JSON response
    formatting, so the schema is conveyed through the prompt only and the
    reply may arrive wrapped in a ```json block.
    """

    name = "fireworks"
    mode = instructor.Mode.MD_JSON

    def __init__(self, config: LLMConfig, http_client: httpx.AsyncClient | None = None) -> None:
        if not config.base_url:
            config = config.model_copy(update={"base_url": FIREWORKS_BASE_URL})
        super().__init__(config, http_client=http_client)
