"""Text-output task handlers.

Architectural role:
    Implements the two tasks whose result is text produced by the Gemini text
    model: the structured SEO listing and image alt text.

Model call flow:
    params -> prompt/schema from `app.prompting.prompt_builder`
    -> `GeminiClient.generate_content` -> response text -> result dict.

Failure scenarios:
    - SEO output that is not valid JSON is logged with the raw text and
      re-raised as `UnexpectedFormatError`.
    - Alt text has no emptiness guard; `""` is a valid result.
    - Transport failures propagate unchanged.
"""

import json
import logging

from app.core.errors import UnexpectedFormatError
from app.core.task_types import GenerateAltTextParams, GenerateSeoParams
from app.llm.client import GeminiClient, inline_part, response_text, text_part
from app.prompting.prompt_builder import ALT_TEXT_PROMPT, build_seo_prompt, build_seo_schema

logger = logging.getLogger(__name__)


def generate_seo(client: GeminiClient, params: GenerateSeoParams) -> dict:
    """Generate an SEO product listing as structured JSON.

    Returns:
        `{"content": {"title", "description", "features", "tags"}}` exactly as
        parsed from the model output.

    Raises:
        UnexpectedFormatError: model output was not valid JSON.
    """
    response = client.generate_content(
        client.config.text_model,
        build_seo_prompt(params.product_name, params.design_description),
        generation_config={
            "responseMimeType": "application/json",
            "responseSchema": build_seo_schema(params.product_name),
        },
    )

    text = response_text(response)
    try:
        content = json.loads(text)
    except ValueError:
        logger.error("Failed to parse JSON response from Gemini: %r", text)
        raise UnexpectedFormatError(
            "The AI returned data in an unexpected format. "
            "Please try generating the SEO listing again."
        )
    return {"content": content}


def generate_alt_text(client: GeminiClient, params: GenerateAltTextParams) -> dict:
    """Describe a mockup image as concise ADA-compliant alt text."""
    response = client.generate_content(
        client.config.text_model,
        [inline_part(params.mime_type, params.data), text_part(ALT_TEXT_PROMPT)],
    )
    return {"text": response_text(response).strip()}
