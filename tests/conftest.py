from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from app.llm.client import GeminiClient
from app.llm.provider_config import ProviderConfig

# base64 of b"hello"
B64 = "aGVsbG8="


def content_response(*parts):
    return {"candidates": [{"content": {"role": "model", "parts": list(parts)}}]}


def image_part(data="b3V0", mime="image/png"):
    return {"inlineData": {"mimeType": mime, "data": data}}


@pytest.fixture
def config():
    return ProviderConfig(api_key="test-key")


@pytest.fixture
def client(config):
    fake = MagicMock(spec=GeminiClient)
    fake.config = config
    return fake
