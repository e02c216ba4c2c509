"""Tests for copy and banner prompt builders."""

from marketing_generator.imggen.prompt_builder import BannerPromptBuilder
from marketing_generator.nlp.prompt_builder import PLATFORM_GUIDELINES, CopyPromptBuilder
from marketing_generator.schemas import GenerationRequest, Platform, ProductImage


def test_copy_prompt_includes_context() -> None:
    request = GenerationRequest(
        productName="EcoBottle Pro",
        description="Keeps drinks cold for 24 hours.",
        category="Home & Garden",
        targetAudience="Commuters",
        platform="LinkedIn",
        tone="Inspirational",
    )

    prompt = CopyPromptBuilder().build(request)

    assert "Create compelling LinkedIn marketing copy" in prompt
    assert "Product Name: EcoBottle Pro" in prompt
    assert "Description: Keeps drinks cold for 24 hours." in prompt
    assert "Category: Home & Garden" in prompt
    assert "Target Audience: Commuters" in prompt
    assert "Tone: Inspirational" in prompt
    assert PLATFORM_GUIDELINES[Platform.LINKEDIN] in prompt


def test_copy_prompt_skips_absent_optional_fields() -> None:
    request = GenerationRequest(productName="EcoBottle Pro", description="Reusable bottle")

    prompt = CopyPromptBuilder().build(request)

    assert "Category:" not in prompt
    assert "Target Audience:" not in prompt
    assert "Tone: Professional" in prompt
    assert "Instagram" in prompt


def test_copy_messages_attach_product_image() -> None:
    image = ProductImage(content=b"\x89PNG", media_type="image/png", filename="bottle.png")
    request = GenerationRequest(
        productName="EcoBottle Pro", description="Reusable bottle", productImage=image
    )

    messages = CopyPromptBuilder().messages(request)

    assert messages[0]["role"] == "system"
    text_part, image_part = messages[1]["content"]
    assert "EcoBottle Pro" in text_part["text"]
    assert image_part["image_url"]["url"] == image.as_data_url()


def test_banner_prompt_truncates_long_descriptions() -> None:
    request = GenerationRequest(productName="EcoBottle Pro", description="a" * 900)

    prompt = BannerPromptBuilder(max_description_chars=100).build(request)

    assert "a" * 100 + "..." in prompt
    assert "a" * 101 not in prompt
    assert "EcoBottle Pro" in prompt
    assert "Do not render any text" in prompt
