"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip().strip("\"'"))


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_chat_model: str = "gpt-4o-mini"
    openai_image_model: str = "dall-e-3"
    openai_image_size: str = "1792x1024"
    openai_image_quality: str = "standard"
    openai_image_response_format: str = "url"
    copy_max_tokens: int = 800
    request_timeout: float = 60.0

    max_image_bytes: int = 10 * 1024 * 1024
    uploads_dir: str = "uploads"

    marketing_api_url: str = "http://localhost:5000"


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")) or ("*",),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
        openai_chat_model=os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini"),
        openai_image_model=os.getenv("OPENAI_IMAGE_MODEL", "dall-e-3"),
        openai_image_size=os.getenv("OPENAI_IMAGE_SIZE", "1792x1024"),
        openai_image_quality=os.getenv("OPENAI_IMAGE_QUALITY", "standard"),
        openai_image_response_format=os.getenv("OPENAI_IMAGE_RESPONSE_FORMAT", "url"),
        copy_max_tokens=int(os.getenv("COPY_MAX_TOKENS", "800")),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "60")),
        max_image_bytes=int(os.getenv("MAX_IMAGE_BYTES", str(10 * 1024 * 1024))),
        uploads_dir=os.getenv("UPLOADS_DIR", "uploads"),
        marketing_api_url=os.getenv("MARKETING_API_URL", "http://localhost:5000"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
