"""Prompt builder for the banner generation step."""

from __future__ import annotations

from marketing_generator.schemas import GenerationRequest

MAX_DESCRIPTION_CHARS = 500


class BannerPromptBuilder:
    """Compose image prompts from product details."""

    def __init__(self, max_description_chars: int = MAX_DESCRIPTION_CHARS) -> None:
        self._max_description_chars = max_description_chars

    def build(self, request: GenerationRequest) -> str:
        """Return a prompt for a social media banner featuring the product."""

        description = request.description
        if len(description) > self._max_description_chars:
            description = description[: self._max_description_chars].rstrip() + "..."

        subject = request.product_name
        if request.category:
            subject = f"{subject}, a {request.category.value.lower()} product"

        return " ".join(
            [
                f"Create a vibrant, eye-catching social media marketing banner for {subject}.",
                f"Product details: {description}",
                "Modern composition, professional product photography lighting,",
                "bold colours and clean background. Do not render any text or logos.",
            ]
        )
