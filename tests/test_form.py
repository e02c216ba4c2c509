"""Tests for the form submission state."""

from __future__ import annotations

import pytest
import pytest_mock

from marketing_generator.client.api_client import MarketingAPIError
from marketing_generator.client.form import (
    MISSING_FIELDS_MESSAGE,
    SUBMIT_FAILED_MESSAGE,
    FormStatus,
    MarketingForm,
    SubmissionInProgressError,
)
from marketing_generator.schemas import GenerationResult


@pytest.fixture
def filled_form() -> MarketingForm:
    form = MarketingForm()
    form.update_field("productName", "EcoBottle Pro")
    form.update_field("description", "Reusable bottle")
    return form


@pytest.fixture
def api_client(mocker: pytest_mock.MockerFixture):
    client = mocker.Mock()
    client.generate = mocker.AsyncMock(
        return_value=GenerationResult(
            marketing_copy="Sip sustainably.", generated_image="https://images.test/b.png"
        )
    )
    return client


def test_new_form_has_defaults() -> None:
    form = MarketingForm()

    assert form.status is FormStatus.IDLE
    assert form.values["platform"] == "Instagram"
    assert form.values["tone"] == "Professional"
    assert not form.can_submit


def test_update_field_rejects_unknown_names() -> None:
    with pytest.raises(KeyError):
        MarketingForm().update_field("price", "10")


def test_attach_and_remove_image() -> None:
    form = MarketingForm()

    form.attach_image("a.png", b"first", "image/png")
    form.attach_image("b.jpg", b"second", "image/jpeg")

    assert form.image is not None and form.image.content == b"second"
    assert form.image_preview == "data:image/jpeg;base64,c2Vjb25k"

    form.remove_image()
    assert form.image is None
    assert form.image_preview is None


@pytest.mark.asyncio
async def test_submit_requires_name_and_description(api_client) -> None:
    form = MarketingForm()
    form.update_field("productName", "EcoBottle Pro")

    result = await form.submit(api_client)

    assert result is None
    assert form.message == MISSING_FIELDS_MESSAGE
    assert form.status is FormStatus.IDLE
    api_client.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_submit_success_populates_result(filled_form: MarketingForm, api_client) -> None:
    filled_form.attach_image("bottle.png", b"\x89PNG", "image/png")

    result = await filled_form.submit(api_client)

    assert result is not None and result.marketing_copy == "Sip sustainably."
    assert filled_form.status is FormStatus.POPULATED
    assert filled_form.message is None
    sent = api_client.generate.await_args.args[0]
    assert sent.product_name == "EcoBottle Pro"
    assert sent.product_image is not None


@pytest.mark.asyncio
async def test_submit_failure_returns_to_idle(filled_form: MarketingForm, api_client) -> None:
    await filled_form.submit(api_client)
    api_client.generate.side_effect = MarketingAPIError("boom", status_code=502)

    result = await filled_form.submit(api_client)

    assert result is None
    assert filled_form.result is None
    assert filled_form.status is FormStatus.IDLE
    assert filled_form.message == SUBMIT_FAILED_MESSAGE
    assert filled_form.values["productName"] == "EcoBottle Pro"


@pytest.mark.asyncio
async def test_submit_is_blocked_while_in_flight(filled_form: MarketingForm, api_client) -> None:
    filled_form.status = FormStatus.IN_PROGRESS

    assert not filled_form.can_submit
    with pytest.raises(SubmissionInProgressError):
        await filled_form.submit(api_client)
    api_client.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_reset_restores_defaults(filled_form: MarketingForm, api_client) -> None:
    filled_form.update_field("tone", "Humorous")
    filled_form.attach_image("bottle.png", b"\x89PNG", "image/png")
    await filled_form.submit(api_client)

    filled_form.reset()

    assert filled_form.status is FormStatus.IDLE
    assert filled_form.result is None
    assert filled_form.image is None
    assert filled_form.values["productName"] == ""
    assert filled_form.values["tone"] == "Professional"
