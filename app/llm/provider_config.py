"""Provider/runtime configuration for the Gemini transport.

Architectural role:
    Centralizes model selection, endpoint and credential lookup for
    `app.llm.client`. Handlers never read the environment themselves; the
    dispatcher calls `load_config()` once per request and hands the result to
    `make_client`.

Resolution:
    Values come from the process environment, optionally seeded from a `.env`
    file via `load_dotenv()` at import time.

Failure behavior:
    A missing API key is not an error here. It is represented as `None`, the
    request goes out without a key, and the provider's rejection surfaces as a
    `ProviderError` at call time.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

# Model routing per capability.
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"
DEFAULT_IMAGE_EDIT_MODEL = "gemini-2.5-flash-image-preview"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"

# Seconds; matches the transport timeout used for every provider call.
DEFAULT_TIMEOUT = 120.0

# `API_KEY` is the historical name; `GEMINI_API_KEY` is accepted as a fallback.
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable snapshot of the settings a `GeminiClient` is bound to."""

    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    image_model: str = DEFAULT_IMAGE_MODEL
    image_edit_model: str = DEFAULT_IMAGE_EDIT_MODEL
    text_model: str = DEFAULT_TEXT_MODEL
    timeout: float = DEFAULT_TIMEOUT


def load_key():
    """Return the first non-empty API key from `API_KEY_ENV_VARS`, else `None`."""
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return None


def _timeout_from_env() -> float:
    raw = os.getenv("GEMINI_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"GEMINI_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"GEMINI_TIMEOUT must be positive, got {raw!r}")
    return value


def load_config() -> ProviderConfig:
    """Build a `ProviderConfig` from the current environment.

    Returns:
        Config with env overrides applied on top of module defaults.

    Raises:
        ValueError: `GEMINI_TIMEOUT` is set but not a positive number.
    """
    return ProviderConfig(
        api_key=load_key(),
        base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        image_model=os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        image_edit_model=os.getenv("GEMINI_IMAGE_EDIT_MODEL", DEFAULT_IMAGE_EDIT_MODEL),
        text_model=os.getenv("GEMINI_TEXT_MODEL", DEFAULT_TEXT_MODEL),
        timeout=_timeout_from_env(),
    )
