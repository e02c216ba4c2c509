"""Save generated copy and banners to local files."""

from __future__ import annotations

import base64
import binascii
import re
from pathlib import Path

import httpx


def default_filename(product_name: str, kind: str) -> str:
    """Return ``<product>_copy.txt`` or ``<product>_banner.png``."""

    stem = re.sub(r"[^\w\-]+", "_", product_name.strip()).strip("_") or "marketing"
    suffix = {"copy": "copy.txt", "banner": "banner.png"}[kind]
    return f"{stem}_{suffix}"


def decode_data_url(image_ref: str) -> bytes:
    """Decode a base64 ``data:`` URL into raw bytes."""

    header, _, encoded = image_ref.partition(",")
    if not header.startswith("data:") or ";base64" not in header or not encoded:
        raise ValueError("Image reference is not a base64 data URL.")
    try:
        return base64.b64decode(encoded, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise ValueError("Image reference contains invalid base64 data.") from exc


async def load_image_bytes(
    image_ref: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float = 60.0,
) -> bytes:
    """Return banner bytes from a ``data:`` URL or by downloading an http(s) URL."""

    if image_ref.startswith("data:"):
        return decode_data_url(image_ref)

    async with httpx.AsyncClient(transport=transport, timeout=timeout) as client:
        response = await client.get(image_ref, follow_redirects=True)
        response.raise_for_status()
        return response.content


def export_text(content: str, filename: str | Path) -> Path:
    """Write the marketing copy to ``filename`` as UTF-8 text."""

    path = Path(filename)
    path.write_text(content, encoding="utf-8")
    return path


async def export_image(
    image_ref: str,
    filename: str | Path,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Path:
    """Write the banner referenced by ``image_ref`` to ``filename``."""

    path = Path(filename)
    path.write_bytes(await load_image_bytes(image_ref, transport=transport))
    return path
