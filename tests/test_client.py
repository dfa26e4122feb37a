from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from app.core.errors import ProviderError
from app.llm.client import (
    GeminiClient,
    find_inline_image,
    first_candidate_parts,
    make_client,
    response_text,
)
from app.llm.provider_config import ProviderConfig


def http_response(status_code=200, body=None, reason="OK"):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@patch("app.llm.client.requests.post")
def test_generate_content_request_shape(mock_post, config):
    mock_post.return_value = http_response(body={"candidates": []})
    client = make_client(config)

    client.generate_content(
        "gemini-2.5-flash", "hello", generation_config={"responseMimeType": "application/json"}
    )

    url = mock_post.call_args.args[0]
    kwargs = mock_post.call_args.kwargs
    assert url == "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"
    assert kwargs["headers"]["x-goog-api-key"] == "test-key"
    assert kwargs["timeout"] == 120.0
    assert kwargs["json"] == {
        "contents": [{"role": "user", "parts": [{"text": "hello"}]}],
        "generationConfig": {"responseMimeType": "application/json"},
    }


@patch("app.llm.client.requests.post")
def test_generate_images_request_shape(mock_post, config):
    mock_post.return_value = http_response(body={"predictions": []})
    GeminiClient(config).generate_images("imagen-4.0-generate-001", "a fox", 3)

    assert mock_post.call_args.args[0].endswith("/models/imagen-4.0-generate-001:predict")
    assert mock_post.call_args.kwargs["json"] == {
        "instances": [{"prompt": "a fox"}],
        "parameters": {
            "sampleCount": 3,
            "aspectRatio": "1:1",
            "outputOptions": {"mimeType": "image/png"},
        },
    }


@patch("app.llm.client.requests.post")
def test_missing_key_sends_no_key_header(mock_post):
    mock_post.return_value = http_response(body={})
    GeminiClient(ProviderConfig(api_key=None)).generate_content("m", "hi")
    assert "x-goog-api-key" not in mock_post.call_args.kwargs["headers"]


@patch("app.llm.client.requests.post")
def test_http_error_uses_provider_message(mock_post, config):
    mock_post.return_value = http_response(
        400, {"error": {"code": 400, "message": "API key not valid."}}, reason="Bad Request"
    )
    with pytest.raises(ProviderError) as info:
        make_client(config).generate_content("m", "hi")
    assert str(info.value) == "Gemini API error (400): API key not valid."
    assert info.value.status_code == 400


@patch("app.llm.client.requests.post")
def test_http_error_without_json_body(mock_post, config):
    mock_post.return_value = http_response(503, ValueError("no json"), reason="Service Unavailable")
    with pytest.raises(ProviderError, match=r"\(503\): Service Unavailable"):
        make_client(config).generate_content("m", "hi")


@patch("app.llm.client.requests.post")
def test_transport_error_wrapped(mock_post, config):
    mock_post.side_effect = requests.exceptions.ConnectTimeout("timed out")
    with pytest.raises(ProviderError, match="timed out") as info:
        make_client(config).generate_images("m", "hi", 1)
    assert info.value.status_code is None


@patch("app.llm.client.requests.post")
def test_non_json_success_body(mock_post, config):
    mock_post.return_value = http_response(200, ValueError("bad"))
    with pytest.raises(ProviderError, match="non-JSON"):
        make_client(config).generate_content("m", "hi")


def test_response_helpers():
    response = {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {"text": "thinking...", "thought": True},
                        {"text": "Done. "},
                        {"inline_data": {"mime_type": "image/webp", "data": "QQ=="}},
                    ]
                }
            }
        ]
    }
    parts = first_candidate_parts(response)
    assert response_text(response) == "Done. "
    assert find_inline_image(parts) == {"mimeType": "image/webp", "data": "QQ=="}
    assert first_candidate_parts({"candidates": [{"content": {"parts": []}}]}) is None
