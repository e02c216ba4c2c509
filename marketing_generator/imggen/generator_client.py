"""Async client for banner image generation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
from openai import AsyncOpenAI

from marketing_generator.config.settings import Settings, get_settings


class BannerGeneratorClient:
    """Requests social media banners from an OpenAI-compatible images endpoint."""

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

    async def generate_banner(self, prompt: str) -> str | None:
        """Generate one banner and return its URL or ``data:`` URL.

        Returns ``None`` when the provider answers without any image payload.
        """

        result = await self._client.images.generate(
            model=self._settings.openai_image_model,
            prompt=prompt,
            n=1,
            size=self._settings.openai_image_size,  # type: ignore[arg-type]
            quality=self._settings.openai_image_quality,  # type: ignore[arg-type]
            response_format=self._settings.openai_image_response_format,  # type: ignore[arg-type]
        )
        return self._to_image_ref(result)

    def _to_image_ref(self, result: Any) -> str | None:
        data_attr = getattr(result, "data", None)
        if not isinstance(data_attr, list) or not data_attr:
            return None
        primary = data_attr[0]

        image_url = getattr(primary, "url", None)
        image_base64 = getattr(primary, "b64_json", None)
        if isinstance(primary, Mapping):
            image_url = image_url or primary.get("url")
            image_base64 = image_base64 or primary.get("b64_json")

        if image_url:
            return image_url
        if image_base64:
            return f"data:image/png;base64,{image_base64}"
        return None

    async def ping(self) -> bool:
        """Return ``True`` when the service responds to a model listing call."""

        models = await self._client.models.list()
        return bool(models.data)

    async def close(self) -> None:
        """Close the underlying HTTP session."""

        await self._client.close()
