"""Form state for collecting product details and holding the latest result."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from marketing_generator.client.api_client import MarketingAPIError
from marketing_generator.schemas import (
    DEFAULT_PLATFORM,
    DEFAULT_TONE,
    GenerationRequest,
    GenerationResult,
    ProductImage,
)

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in at least product name and description"
SUBMIT_FAILED_MESSAGE = (
    "Error generating content. Please try again and make sure the backend is running."
)

FIELD_DEFAULTS: dict[str, str] = {
    "productName": "",
    "description": "",
    "category": "",
    "targetAudience": "",
    "platform": DEFAULT_PLATFORM.value,
    "tone": DEFAULT_TONE.value,
}


class FormStatus(str, Enum):
    """What the form currently renders."""

    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    POPULATED = "populated"


class SubmissionInProgressError(RuntimeError):
    """Raised when submit is called while a previous submission is pending."""


class GenerationClient(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResult: ...


class MarketingForm:
    """Editable request state plus the read-only result of the last submission."""

    def __init__(self) -> None:
        self.values: dict[str, str] = dict(FIELD_DEFAULTS)
        self.image: ProductImage | None = None
        self.status = FormStatus.IDLE
        self.result: GenerationResult | None = None
        self.message: str | None = None

    @property
    def image_preview(self) -> str | None:
        """Data URL of the attached image, renderable without a round trip."""

        return self.image.as_data_url() if self.image is not None else None

    @property
    def can_submit(self) -> bool:
        return (
            self.status is not FormStatus.IN_PROGRESS
            and bool(self.values["productName"].strip())
            and bool(self.values["description"].strip())
        )

    def update_field(self, name: str, value: str) -> None:
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = value

    def attach_image(self, filename: str, content: bytes, media_type: str) -> None:
        """Store the product photo; replaces any previously attached one."""

        self.image = ProductImage(content=content, media_type=media_type, filename=filename)

    def remove_image(self) -> None:
        self.image = None

    def validation_error(self) -> str | None:
        if not self.values["productName"].strip() or not self.values["description"].strip():
            return MISSING_FIELDS_MESSAGE
        return None

    def build_request(self) -> GenerationRequest:
        return GenerationRequest.model_validate({**self.values, "productImage": self.image})

    async def submit(self, client: GenerationClient) -> GenerationResult | None:
        """Send the current request once and store the outcome.

        Returns the result on success and ``None`` when validation blocked the
        submission or the request failed; ``message`` explains which.
        """

        if self.status is FormStatus.IN_PROGRESS:
            raise SubmissionInProgressError("A generation request is already in progress.")

        self.message = self.validation_error()
        if self.message:
            return None

        try:
            request = self.build_request()
        except ValueError as exc:
            logger.warning("Form values rejected before submission: %s", exc)
            self.message = "Please check the selected category, platform and tone."
            return None

        self.status = FormStatus.IN_PROGRESS
        self.result = None
        try:
            self.result = await client.generate(request)
        except MarketingAPIError as exc:
            logger.error("Error generating marketing content: %s", exc)
            self.message = SUBMIT_FAILED_MESSAGE
        finally:
            self.status = FormStatus.POPULATED if self.result is not None else FormStatus.IDLE
        return self.result

    def reset(self) -> None:
        """Clear the request back to defaults and discard any result."""

        self.values = dict(FIELD_DEFAULTS)
        self.image = None
        self.result = None
        self.message = None
        self.status = FormStatus.IDLE
