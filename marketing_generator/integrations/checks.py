"""Connectivity checks for external AI providers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

from marketing_generator.imggen.generator_client import BannerGeneratorClient
from marketing_generator.nlp.copy_client import CopyWriterClient


class _PingableClient(Protocol):
    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
    )


def _ping_with(client_factory: Callable[[], _PingableClient]) -> Callable[[], Awaitable[bool]]:
    async def _ping() -> bool:
        client = client_factory()
        try:
            return await client.ping()
        finally:
            await client.close()

    return _ping


async def check_text_provider() -> IntegrationCheckResult:
    """Ping the text-generation provider and return the result."""

    return await _run_check(
        name="Text provider",
        factory=_ping_with(CopyWriterClient),
        success_message="Chat completions API is reachable.",
    )


async def check_image_provider() -> IntegrationCheckResult:
    """Ping the image-generation provider and return the result."""

    return await _run_check(
        name="Image provider",
        factory=_ping_with(BannerGeneratorClient),
        success_message="Image generation API is reachable.",
    )


async def run_all_checks() -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_text_provider(), check_image_provider()))
