# Product details form -> POST /api/marketing/generate -> copy and banner preview with downloads.
# Run with: streamlit run marketing_generator/client/streamlit_app.py

from __future__ import annotations

import asyncio

import httpx
import streamlit as st

from marketing_generator.client.api_client import MarketingAPIClient
from marketing_generator.client.export import default_filename, load_image_bytes
from marketing_generator.client.form import FormStatus, MarketingForm
from marketing_generator.schemas import Category, GenerationResult, Platform, Tone

st.set_page_config(page_title="AI Marketing Generator", layout="wide")

if "form" not in st.session_state:
    st.session_state.form = MarketingForm()
form: MarketingForm = st.session_state.form


async def _submit(current: MarketingForm) -> GenerationResult | None:
    async with MarketingAPIClient() as client:
        return await current.submit(client)


@st.cache_data(show_spinner=False)
def _banner_bytes(image_ref: str) -> bytes | None:
    try:
        return asyncio.run(load_image_bytes(image_ref))
    except (httpx.HTTPError, ValueError):
        return None


def _reset() -> None:
    form.reset()
    for key in ("productName", "description", "category", "targetAudience", "platform", "tone"):
        st.session_state.pop(f"field_{key}", None)
    st.session_state.pop("uploader", None)


st.title("AI Marketing Generator")
st.caption("Create professional marketing copy and social media images instantly")

left, right = st.columns(2)

# ------------------------
# Product details
# ------------------------
with left:
    st.subheader("Product Details")

    form.update_field(
        "productName",
        st.text_input("Product Name *", placeholder="e.g., EcoBottle Pro", key="field_productName"),
    )
    form.update_field(
        "description",
        st.text_area(
            "Product Description *",
            placeholder="Describe your product's features and benefits...",
            key="field_description",
        ),
    )
    categories = [""] + [c.value for c in Category]
    form.update_field(
        "category",
        st.selectbox(
            "Category",
            categories,
            format_func=lambda c: c or "Select a category",
            key="field_category",
        ),
    )
    form.update_field(
        "targetAudience",
        st.text_input(
            "Target Audience",
            placeholder="e.g., Young professionals, fitness enthusiasts",
            key="field_targetAudience",
        ),
    )
    col_platform, col_tone = st.columns(2)
    with col_platform:
        form.update_field(
            "platform", st.selectbox("Platform", [p.value for p in Platform], key="field_platform")
        )
    with col_tone:
        form.update_field("tone", st.selectbox("Tone", [t.value for t in Tone], key="field_tone"))

    uploaded = st.file_uploader(
        "Product Image (Optional)", type=["png", "jpg", "jpeg", "webp"], key="uploader"
    )
    if uploaded is not None:
        form.attach_image(uploaded.name, uploaded.getvalue(), uploaded.type or "image/png")
        st.image(form.image.content, caption="Preview", width=240)
    else:
        form.remove_image()

    if st.button(
        "Generate Marketing Assets",
        type="primary",
        disabled=form.status is FormStatus.IN_PROGRESS,
    ):
        with right, st.spinner("Creating your marketing assets. This may take 15-30 seconds..."):
            asyncio.run(_submit(form))

    if form.status is FormStatus.POPULATED:
        st.button("Start Over", on_click=_reset)

    if form.message:
        st.error(form.message)

# ------------------------
# Results
# ------------------------
with right:
    if form.status is FormStatus.POPULATED and form.result is not None:
        result = form.result
        product_name = form.values["productName"]

        st.subheader("Marketing Copy")
        st.text(result.marketing_copy)
        tags = [form.values["platform"], form.values["tone"]]
        if form.values["category"]:
            tags.append(form.values["category"])
        st.caption(" · ".join(tags))
        st.download_button(
            "Download copy",
            data=result.marketing_copy.encode("utf-8"),
            file_name=default_filename(product_name, "copy"),
            mime="text/plain",
        )

        if result.generated_image:
            st.subheader("Social Media Banner")
            banner = _banner_bytes(result.generated_image)
            st.image(banner or result.generated_image)
            if banner:
                st.download_button(
                    "Download banner",
                    data=banner,
                    file_name=default_filename(product_name, "banner"),
                    mime="image/png",
                )
            else:
                st.warning("The banner could not be downloaded.")

        st.success("Marketing assets ready! Download and use them across your marketing channels.")
    else:
        st.subheader("Ready to Generate")
        st.write(
            "Fill in the product details and click generate to create professional marketing content."
        )
