"""Client for marketing copy generation via the configured LLM provider."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from openai import AsyncOpenAI

from marketing_generator.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class CopyWriterClient:
    """Thin client around an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = settings or get_settings()
        if not settings.openai_api_key:
            raise RuntimeError("OpenAI API key is not configured.")

        self._settings = settings
        self._client = AsyncOpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url.rstrip("/"),
            timeout=settings.request_timeout,
            max_retries=0,
            http_client=http_client,
        )

    async def write_copy(self, messages: list[dict[str, Any]]) -> str:
        """Send the copywriting prompt and return the generated text."""

        response = await self._client.chat.completions.create(
            model=self._settings.openai_chat_model,
            messages=messages,  # type: ignore[arg-type]
            max_tokens=self._settings.copy_max_tokens,
            temperature=0.8,
        )
        if not response.choices:
            logger.warning("Chat completion returned no choices.")
            return ""
        return (response.choices[0].message.content or "").strip()

    async def ping(self) -> bool:
        """Return ``True`` if the upstream service responds to a model listing call."""

        models = await self._client.models.list()
        return bool(models.data)

    async def close(self) -> None:
        """Release HTTP resources."""

        await self._client.close()
