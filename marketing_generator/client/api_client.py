"""Async HTTP client for the marketing generation API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from marketing_generator.config.settings import Settings, get_settings
from marketing_generator.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/marketing/generate"
HEALTH_PATH = "/api/health"


class MarketingAPIError(RuntimeError):
    """Raised when the API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MarketingAPIClient:
    """Submits generation requests as multipart form data."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.marketing_api_url).rstrip("/"),
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def __aenter__(self) -> MarketingAPIClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request_json(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise MarketingAPIError(
                _error_message(exc.response),
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", endpoint, exc)
            raise MarketingAPIError(f"Could not reach the marketing API: {exc}") from exc
        except ValueError as exc:
            raise MarketingAPIError("The marketing API returned a malformed response.") from exc

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Post the request and return the generated copy and banner."""

        # A ``None`` filename renders a plain form field, keeping the body multipart
        # even when no image is attached.
        files: dict[str, tuple[Any, ...]] = {
            name: (None, value) for name, value in request.form_fields().items()
        }
        if request.product_image is not None:
            image = request.product_image
            files["productImage"] = (image.filename, image.content, image.media_type)

        payload = await self._request_json("POST", GENERATE_PATH, files=files)
        try:
            return GenerationResult.model_validate(payload)
        except ValueError as exc:
            raise MarketingAPIError("The marketing API returned an unexpected payload.") from exc

    async def health(self) -> dict[str, Any]:
        """Return the API liveness payload."""

        return await self._request_json("GET", HEALTH_PATH)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Marketing API returned HTTP {response.status_code}."
