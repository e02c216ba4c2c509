"""Marketing generation routes."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError

from marketing_generator.config.settings import get_settings
from marketing_generator.errors import RequestValidationFailed
from marketing_generator.imggen.generator_client import BannerGeneratorClient
from marketing_generator.nlp.copy_client import CopyWriterClient
from marketing_generator.schemas import ErrorResponse, GenerationRequest, GenerationResult
from marketing_generator.services.generation import MarketingGenerationService

router = APIRouter(prefix="/api/marketing", tags=["marketing"])
logger = logging.getLogger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "request"
        message = str(error.get("msg", "is invalid")).removeprefix("Value error, ")
        problems.append(f"{field}: {message}")
    return "; ".join(problems)


async def parse_generation_request(
    product_name: str = Form("", alias="productName"),
    description: str = Form(""),
    category: str = Form(""),
    target_audience: str = Form("", alias="targetAudience"),
    platform: str = Form(""),
    tone: str = Form(""),
    product_image: UploadFile | None = File(None, alias="productImage"),
) -> GenerationRequest:
    """Turn the multipart body into a validated ``GenerationRequest``."""

    if not product_name.strip() or not description.strip():
        raise RequestValidationFailed("Product name and description are required.")

    image_payload = None
    if product_image is not None:
        content = await product_image.read()
        if len(content) > get_settings().max_image_bytes:
            raise RequestValidationFailed("productImage exceeds the maximum allowed size.")
        if content:
            image_payload = {
                "content": content,
                "media_type": product_image.content_type or "application/octet-stream",
                "filename": product_image.filename or "product",
            }

    try:
        return GenerationRequest.model_validate(
            {
                "productName": product_name,
                "description": description,
                "category": category,
                "targetAudience": target_audience,
                "platform": platform,
                "tone": tone,
                "productImage": image_payload,
            }
        )
    except ValidationError as exc:
        raise RequestValidationFailed(_describe_validation_error(exc)) from exc


async def get_generation_service() -> AsyncIterator[MarketingGenerationService]:
    """Provide a generation service whose provider clients live for one request."""

    settings = get_settings()
    service = MarketingGenerationService(
        CopyWriterClient(settings),
        BannerGeneratorClient(settings),
    )
    try:
        yield service
    finally:
        await service.close()


@router.post(
    "/generate",
    response_model=GenerationResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    summary="Generate marketing copy and a social media banner",
)
async def generate_marketing(
    # Declared before the service so invalid requests never build provider clients.
    request: GenerationRequest = Depends(parse_generation_request),
    service: MarketingGenerationService = Depends(get_generation_service),
) -> GenerationResult:
    logger.info(
        "Generating marketing assets for %r (platform=%s, tone=%s, image=%s)",
        request.product_name,
        request.platform.value,
        request.tone.value,
        request.product_image is not None,
    )
    result = await service.generate(request)
    if result.generated_image is None:
        logger.info("Returning copy without banner for %r", request.product_name)
    return result
