"""Prompt construction for the marketing copy step."""

from __future__ import annotations

from typing import Any

from marketing_generator.schemas import GenerationRequest, Platform

SYSTEM_PROMPT = (
    "You are an expert social media copywriter. You write persuasive, "
    "platform-native marketing copy that highlights concrete product benefits."
)

PLATFORM_GUIDELINES: dict[Platform, str] = {
    Platform.INSTAGRAM: (
        "Open with a scroll-stopping hook, use short paragraphs and a few emojis, "
        "and finish with 5-10 relevant hashtags."
    ),
    Platform.LINKEDIN: (
        "Keep it professional and value-focused, lead with the business benefit, "
        "avoid emojis overload and end with a clear call to action."
    ),
    Platform.TWITTER: "Stay under 280 characters and use at most two hashtags.",
    Platform.FACEBOOK: (
        "Use a conversational, community-oriented voice with a question or "
        "call to action that invites comments."
    ),
    Platform.TIKTOK: (
        "Write a punchy caption suited to short-form video, with trending-style "
        "phrasing and 3-5 hashtags."
    ),
}


class CopyPromptBuilder:
    """Compose chat messages that ask for marketing copy."""

    def build(self, request: GenerationRequest) -> str:
        """Return the user prompt describing the product and the desired copy."""

        lines = [
            f"Create compelling {request.platform.value} marketing copy for the following product.",
            "",
            f"Product Name: {request.product_name}",
            f"Description: {request.description}",
        ]
        if request.category:
            lines.append(f"Category: {request.category.value}")
        if request.target_audience:
            lines.append(f"Target Audience: {request.target_audience}")
        lines.append(f"Tone: {request.tone.value}")
        lines.extend(
            [
                "",
                f"Platform guidelines: {PLATFORM_GUIDELINES[request.platform]}",
                "Return only the final copy, ready to post, without any preamble.",
            ]
        )
        return "\n".join(lines)

    def messages(self, request: GenerationRequest) -> list[dict[str, Any]]:
        """Return chat completion messages, attaching the product photo when present."""

        prompt = self.build(request)
        if request.product_image is None:
            user_content: Any = prompt
        else:
            user_content = [
                {
                    "type": "text",
                    "text": f"{prompt}\n\nUse the attached product photo for visual details.",
                },
                {
                    "type": "image_url",
                    "image_url": {"url": request.product_image.as_data_url()},
                },
            ]
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_content},
        ]
