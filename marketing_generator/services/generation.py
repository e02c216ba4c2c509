"""Marketing generation pipeline: mandatory copy plus best-effort banner."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from marketing_generator.errors import TextGenerationError
from marketing_generator.imggen.generator_client import BannerGeneratorClient
from marketing_generator.imggen.prompt_builder import BannerPromptBuilder
from marketing_generator.nlp.copy_client import CopyWriterClient
from marketing_generator.nlp.prompt_builder import CopyPromptBuilder
from marketing_generator.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


class MarketingGenerationService:
    """Runs the copy and banner steps for a single request."""

    def __init__(
        self,
        copy_client: CopyWriterClient,
        banner_client: BannerGeneratorClient,
        *,
        copy_prompts: CopyPromptBuilder | None = None,
        banner_prompts: BannerPromptBuilder | None = None,
    ) -> None:
        self._copy_client = copy_client
        self._banner_client = banner_client
        self._copy_prompts = copy_prompts or CopyPromptBuilder()
        self._banner_prompts = banner_prompts or BannerPromptBuilder()

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Produce marketing copy and, when possible, a banner image.

        Both provider calls are issued concurrently. A failed banner only drops
        ``generated_image``; a failed copy step raises ``TextGenerationError``
        and cancels the banner call still in flight.
        """

        banner_task = asyncio.create_task(self.render_banner(request))
        try:
            marketing_copy = await self.write_copy(request)
        except BaseException:
            banner_task.cancel()
            with suppress(asyncio.CancelledError):
                await banner_task
            raise

        banner = await banner_task
        return GenerationResult(marketing_copy=marketing_copy, generated_image=banner)

    async def write_copy(self, request: GenerationRequest) -> str:
        try:
            text = await self._copy_client.write_copy(self._copy_prompts.messages(request))
        except Exception as exc:
            logger.exception("Copy generation failed for %r", request.product_name)
            raise TextGenerationError(
                "The text generation provider could not create marketing copy."
            ) from exc

        if not text:
            logger.error("Copy generation returned empty text for %r", request.product_name)
            raise TextGenerationError("The text generation provider returned no marketing copy.")
        return text

    async def render_banner(self, request: GenerationRequest) -> str | None:
        try:
            image_ref = await self._banner_client.generate_banner(self._banner_prompts.build(request))
        except Exception as exc:
            logger.warning("Banner generation failed for %r: %s", request.product_name, exc)
            return None

        if not image_ref:
            logger.warning("Banner generation returned no image for %r", request.product_name)
        return image_ref

    async def close(self) -> None:
        """Release both provider clients."""

        await asyncio.gather(self._copy_client.close(), self._banner_client.close())
