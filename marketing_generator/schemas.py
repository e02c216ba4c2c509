"""Request and result models shared by the endpoint and the form client."""

from __future__ import annotations

import base64
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Product categories offered by the form."""

    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    FOOD_AND_BEVERAGE = "Food & Beverage"
    BEAUTY = "Beauty"
    HOME_AND_GARDEN = "Home & Garden"
    SPORTS = "Sports"
    TECHNOLOGY = "Technology"
    HEALTH = "Health"


class Platform(str, Enum):
    """Social platforms the copy can be tailored for."""

    INSTAGRAM = "Instagram"
    LINKEDIN = "LinkedIn"
    TWITTER = "Twitter"
    FACEBOOK = "Facebook"
    TIKTOK = "TikTok"


class Tone(str, Enum):
    """Writing tones the copy can be produced in."""

    PROFESSIONAL = "Professional"
    CASUAL = "Casual"
    HUMOROUS = "Humorous"
    INSPIRATIONAL = "Inspirational"
    URGENT = "Urgent"
    FRIENDLY = "Friendly"


DEFAULT_PLATFORM = Platform.INSTAGRAM
DEFAULT_TONE = Tone.PROFESSIONAL


class ProductImage(BaseModel):
    """Uploaded product photo carried alongside the text fields."""

    content: bytes
    media_type: str
    filename: str = "product.png"

    @field_validator("media_type")
    @classmethod
    def _must_be_image(cls, value: str) -> str:
        value = value.strip().lower()
        if not value.startswith("image/"):
            raise ValueError("productImage must be an image file")
        return value

    def as_data_url(self) -> str:
        """Return the image encoded as a ``data:`` URL."""

        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"


class GenerationRequest(BaseModel):
    """Validated product details submitted for generation."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(alias="productName")
    description: str
    category: Category | None = None
    target_audience: str | None = Field(default=None, alias="targetAudience")
    platform: Platform = DEFAULT_PLATFORM
    tone: Tone = DEFAULT_TONE
    product_image: ProductImage | None = Field(default=None, alias="productImage")

    @field_validator("product_name", "description", mode="before")
    @classmethod
    def _require_text(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("must not be empty")
        return value.strip() if isinstance(value, str) else value

    @field_validator("category", "target_audience", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("platform", mode="before")
    @classmethod
    def _default_platform(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PLATFORM
        return value

    @field_validator("tone", mode="before")
    @classmethod
    def _default_tone(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_TONE
        return value

    def form_fields(self) -> dict[str, str]:
        """Return the text fields keyed by their wire names."""

        return {
            "productName": self.product_name,
            "description": self.description,
            "category": self.category.value if self.category else "",
            "targetAudience": self.target_audience or "",
            "platform": self.platform.value,
            "tone": self.tone.value,
        }


class GenerationResult(BaseModel):
    """Marketing copy plus the optional banner reference."""

    model_config = ConfigDict(populate_by_name=True)

    marketing_copy: str = Field(alias="marketingCopy")
    generated_image: str | None = Field(default=None, alias="generatedImage")


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""

    error: str
    message: str
