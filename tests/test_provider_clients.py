"""Tests for the OpenAI-backed copy and banner clients."""

from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest
import pytest_mock

from marketing_generator.config.settings import Settings
from marketing_generator.imggen.generator_client import BannerGeneratorClient
from marketing_generator.nlp.copy_client import CopyWriterClient

SETTINGS = Settings(openai_api_key="test-openai", openai_chat_model="gpt-test", copy_max_tokens=321)


def test_clients_require_api_key() -> None:
    with pytest.raises(RuntimeError):
        CopyWriterClient(Settings(openai_api_key=""))
    with pytest.raises(RuntimeError):
        BannerGeneratorClient(Settings(openai_api_key=""))


@pytest.mark.asyncio
async def test_write_copy_returns_stripped_text(mocker: pytest_mock.MockerFixture) -> None:
    openai_mock = mocker.patch("marketing_generator.nlp.copy_client.AsyncOpenAI")
    completions = openai_mock.return_value.chat.completions
    completions.create = mocker.AsyncMock(
        return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="  Fresh copy.\n"))]
        )
    )
    messages = [{"role": "user", "content": "Write copy"}]

    text = await CopyWriterClient(SETTINGS).write_copy(messages)

    assert text == "Fresh copy."
    kwargs = completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert kwargs["max_tokens"] == 321
    assert kwargs["messages"] == messages


@pytest.mark.asyncio
async def test_write_copy_without_choices_is_empty(mocker: pytest_mock.MockerFixture) -> None:
    openai_mock = mocker.patch("marketing_generator.nlp.copy_client.AsyncOpenAI")
    openai_mock.return_value.chat.completions.create = mocker.AsyncMock(
        return_value=SimpleNamespace(choices=[])
    )

    assert await CopyWriterClient(SETTINGS).write_copy([]) == ""


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("item", "expected"),
    [
        (SimpleNamespace(url="https://images.test/b.png", b64_json=None), "https://images.test/b.png"),
        (SimpleNamespace(url=None, b64_json="iVBORw=="), "data:image/png;base64,iVBORw=="),
        (SimpleNamespace(url=None, b64_json=None), None),
    ],
)
async def test_generate_banner_normalises_reference(
    mocker: pytest_mock.MockerFixture, item: SimpleNamespace, expected: str | None
) -> None:
    openai_mock = mocker.patch("marketing_generator.imggen.generator_client.AsyncOpenAI")
    images = openai_mock.return_value.images
    images.generate = mocker.AsyncMock(return_value=SimpleNamespace(data=[item]))

    result = await BannerGeneratorClient(SETTINGS).generate_banner("A banner")

    assert result == expected
    kwargs = images.generate.await_args.kwargs
    assert kwargs["prompt"] == "A banner"
    assert kwargs["model"] == SETTINGS.openai_image_model


@pytest.mark.asyncio
async def test_generate_banner_handles_empty_data(mocker: pytest_mock.MockerFixture) -> None:
    openai_mock = mocker.patch("marketing_generator.imggen.generator_client.AsyncOpenAI")
    openai_mock.return_value.images.generate = mocker.AsyncMock(return_value=SimpleNamespace(data=[]))

    assert await BannerGeneratorClient(SETTINGS).generate_banner("A banner") is None


def _failing_http_client(seen: list[str]) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(500, json={"error": {"message": "upstream unavailable"}})

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_write_copy_fails_once_without_retrying() -> None:
    seen: list[str] = []
    client = CopyWriterClient(SETTINGS, http_client=_failing_http_client(seen))

    with pytest.raises(openai.APIStatusError):
        await client.write_copy([{"role": "user", "content": "Write copy"}])
    await client.close()

    assert seen == ["/v1/chat/completions"]


@pytest.mark.asyncio
async def test_generate_banner_fails_once_without_retrying() -> None:
    seen: list[str] = []
    client = BannerGeneratorClient(SETTINGS, http_client=_failing_http_client(seen))

    with pytest.raises(openai.APIStatusError):
        await client.generate_banner("A banner")
    await client.close()

    assert seen == ["/v1/images/generations"]
