from __future__ import annotations

import logging

import pytest

from app.core.errors import UnexpectedFormatError
from app.core.task_types import GenerateAltTextParams, GenerateSeoParams
from app.llm.service import generate_alt_text, generate_seo
from app.prompting.prompt_builder import ALT_TEXT_PROMPT
from tests.conftest import B64, content_response

SEO_PARAMS = GenerateSeoParams.model_validate(
    {"productName": "tote bag", "designDescription": "watercolor lemons"}
)


def test_generate_seo_sends_schema_and_prompt(client):
    client.generate_content.return_value = content_response(
        {"text": '{"title": "t", "description": "d", "features": [], "tags": []}'}
    )

    result = generate_seo(client, SEO_PARAMS)

    assert result == {"content": {"title": "t", "description": "d", "features": [], "tags": []}}
    model, prompt = client.generate_content.call_args.args
    assert model == "gemini-2.5-flash"
    assert prompt == (
        "Generate an SEO-optimized product listing for a tote bag "
        "with a design described as: watercolor lemons."
    )
    config = client.generate_content.call_args.kwargs["generation_config"]
    assert config["responseMimeType"] == "application/json"
    assert config["responseSchema"]["required"] == ["title", "description", "features", "tags"]
    assert "tote bag" in config["responseSchema"]["properties"]["title"]["description"]


def test_generate_seo_joins_split_text_parts(client):
    client.generate_content.return_value = content_response({"text": '{"title": '}, {"text": '"x"}'})
    assert generate_seo(client, SEO_PARAMS) == {"content": {"title": "x"}}


def test_generate_seo_bad_json_logs_raw_text(client, caplog):
    client.generate_content.return_value = content_response({"text": "Sure! Here is a listing"})
    with caplog.at_level(logging.ERROR, logger="app.llm.service"):
        with pytest.raises(UnexpectedFormatError, match="unexpected format"):
            generate_seo(client, SEO_PARAMS)
    assert "Sure! Here is a listing" in caplog.text


def test_generate_seo_no_candidates_is_unexpected_format(client):
    client.generate_content.return_value = {"candidates": []}
    with pytest.raises(UnexpectedFormatError):
        generate_seo(client, SEO_PARAMS)


def test_generate_alt_text(client):
    client.generate_content.return_value = content_response({"text": "\n A red mug. \n"})
    params = GenerateAltTextParams.model_validate({"mimeType": "image/png", "data": B64})

    assert generate_alt_text(client, params) == {"text": "A red mug."}
    args = client.generate_content.call_args
    assert args.args[1][1] == {"text": ALT_TEXT_PROMPT}
    assert "generation_config" not in args.kwargs


def test_generate_alt_text_empty_is_valid(client):
    client.generate_content.return_value = content_response()
    params = GenerateAltTextParams.model_validate({"mimeType": "image/png", "data": B64})
    assert generate_alt_text(client, params) == {"text": ""}
