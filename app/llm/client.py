"""Gemini REST transport client.

Architectural role:
    Executes HTTP requests against the Gemini / Imagen REST API and exposes
    small helpers for reading the parts of a response the task handlers care
    about. Handlers build the request content; this module only moves it.

Model invocation flow:
    handler -> `GeminiClient.generate_content` / `generate_images`
    -> `requests.post(<base>/models/<model>:<method>)` -> parsed JSON dict.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the
    configured timeout.

Failure handling model:
    Transport failures, non-2xx statuses and non-JSON bodies are raised as
    `ProviderError`. Nothing is converted to return values; the dispatcher
    owns translation into HTTP responses.
"""

import logging

import requests

from app.core.errors import ProviderError
from app.llm.provider_config import ProviderConfig

logger = logging.getLogger(__name__)


# =========================================================
# CONTENT PARTS
# =========================================================

def text_part(text: str) -> dict:
    return {"text": text}


def inline_part(mime_type: str, data: str) -> dict:
    """Build an inline binary part from an already base64-encoded payload."""
    return {"inlineData": {"mimeType": mime_type, "data": data}}


# =========================================================
# RESPONSE HELPERS
# =========================================================

def first_candidate_parts(response: dict):
    """Return the content parts of the first candidate.

    Returns:
        The parts list, or `None` when there is no candidate, the candidate
        has no content, or the content has no parts. An empty parts list is
        reported as `None` as well.
    """
    candidates = response.get("candidates") or []
    if not candidates:
        return None
    content = candidates[0].get("content") or {}
    return content.get("parts") or None


def find_inline_image(parts):
    """Return `{"mimeType", "data"}` of the first inline image part, else `None`.

    The REST API answers in camelCase but snake_case keys are accepted too.
    """
    for part in parts:
        inline = part.get("inlineData") or part.get("inline_data")
        if inline and inline.get("data"):
            return {
                "mimeType": inline.get("mimeType") or inline.get("mime_type") or "image/png",
                "data": inline["data"],
            }
    return None


def response_text(response: dict) -> str:
    """Concatenate the text parts of the first candidate.

    Thought-summary parts are skipped. A response without text yields `""`.
    """
    parts = first_candidate_parts(response) or []
    return "".join(
        part["text"]
        for part in parts
        if isinstance(part.get("text"), str) and not part.get("thought")
    )


def generated_images(response: dict) -> list:
    """Return base64 image payloads from an Imagen `predict` response, in order."""
    predictions = response.get("predictions") or []
    return [p["bytesBase64Encoded"] for p in predictions if p.get("bytesBase64Encoded")]


def _build_http_error_message(response: requests.Response) -> str:
    """Build a provider-labeled error message from a non-2xx response."""
    detail = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            detail = error.get("message")
        elif isinstance(error, str):
            detail = error
    if not detail:
        detail = response.reason or "request failed"
    return f"Gemini API error ({response.status_code}): {detail}"


# =========================================================
# CLIENT
# =========================================================

class GeminiClient:
    """Thin Gemini REST client bound to one `ProviderConfig`.

    Holds no per-call state; a new instance is built for every request.
    """

    def __init__(self, config: ProviderConfig):
        self.config = config

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["x-goog-api-key"] = self.config.api_key
        return headers

    def _post(self, model: str, method: str, payload: dict) -> dict:
        url = f"{self.config.base_url}/models/{model}:{method}"
        logger.debug("Gemini call model=%s method=%s", model, method)

        try:
            response = requests.post(
                url,
                headers=self._headers(),
                json=payload,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as err:
            raise ProviderError(f"Gemini request failed: {err}") from err

        if response.status_code >= 400:
            raise ProviderError(
                _build_http_error_message(response),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as err:
            raise ProviderError(
                "Gemini returned a non-JSON response.",
                status_code=response.status_code,
            ) from err

    def generate_content(self, model: str, contents, generation_config: dict | None = None) -> dict:
        """Call `models/<model>:generateContent`.

        Args:
            model: Gemini model name.
            contents: Either a plain prompt string or a list of content parts
                (see `text_part` / `inline_part`); sent as a single user turn.
            generation_config: Optional `generationConfig` object
                (`responseModalities`, `responseMimeType`, `responseSchema`).

        Returns:
            Raw response JSON.
        """
        parts = [text_part(contents)] if isinstance(contents, str) else list(contents)
        payload = {"contents": [{"role": "user", "parts": parts}]}
        if generation_config:
            payload["generationConfig"] = generation_config
        return self._post(model, "generateContent", payload)

    def generate_images(
        self,
        model: str,
        prompt: str,
        number_of_images: int,
        output_mime_type: str = "image/png",
        aspect_ratio: str = "1:1",
    ) -> dict:
        """Call the Imagen `models/<model>:predict` endpoint."""
        payload = {
            "instances": [{"prompt": prompt}],
            "parameters": {
                "sampleCount": number_of_images,
                "aspectRatio": aspect_ratio,
                "outputOptions": {"mimeType": output_mime_type},
            },
        }
        return self._post(model, "predict", payload)


def make_client(config: ProviderConfig) -> GeminiClient:
    """Build a client handle for one request."""
    return GeminiClient(config)
