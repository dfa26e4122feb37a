"""Image-output task handlers.

Role in pipeline:
    - `generate_image`: Imagen text-to-image (`generateImage`).
    - `remove_background`: subject isolation on transparency (`removeBackground`).
    - `apply_design`: composite artwork onto a product mockup (`applyDesign`).

Each handler builds one provider request, performs exactly one call through
the supplied `GeminiClient`, and reshapes the response into the task result.

Base64 scope:
    - Inputs arrive base64-encoded and are forwarded as-is.
    - Outputs are returned base64-encoded; nothing is decoded locally.

Response shape asymmetry:
    `remove_background` wraps its image as a data URI while `apply_design`
    returns the bare base64 payload. Existing callers depend on both shapes.

Error handling strategy:
    - Missing images raise `NoImageReturnedError`.
    - Transport failures from the client propagate unchanged.
"""

from app.core.errors import NoImageReturnedError
from app.core.task_types import ApplyDesignParams, GenerateImageParams, RemoveBackgroundParams
from app.llm.client import (
    GeminiClient,
    find_inline_image,
    first_candidate_parts,
    generated_images,
    inline_part,
    text_part,
)
from app.prompting.prompt_builder import REMOVE_BACKGROUND_PROMPT, build_apply_design_prompt

# Image-editing calls accept both modalities; the model may narrate alongside the image.
IMAGE_AND_TEXT = {"responseModalities": ["IMAGE", "TEXT"]}

MOCKUP_MIME_TYPE = "image/png"


def generate_image(client: GeminiClient, params: GenerateImageParams) -> dict:
    """Generate `numberOfImages` square PNG images for a text prompt.

    Returns:
        `{"images": [<base64>, ...]}` in provider order.

    Raises:
        NoImageReturnedError: provider returned no images.
    """
    response = client.generate_images(
        client.config.image_model,
        params.prompt,
        params.number_of_images,
        output_mime_type="image/png",
        aspect_ratio="1:1",
    )

    images = generated_images(response)
    if not images:
        raise NoImageReturnedError("Image generation failed to produce any images.")
    return {"images": images}


def remove_background(client: GeminiClient, params: RemoveBackgroundParams) -> dict:
    """Isolate the subject of an image on a transparent background.

    Returns:
        `{"image": "data:<mime>;base64,<data>"}`.
    """
    response = client.generate_content(
        client.config.image_edit_model,
        [inline_part(params.mime_type, params.data), text_part(REMOVE_BACKGROUND_PROMPT)],
        generation_config=IMAGE_AND_TEXT,
    )

    parts = first_candidate_parts(response)
    if not parts:
        raise NoImageReturnedError(
            "Background removal failed. The AI did not return an image, "
            "which might be due to a safety filter."
        )

    image = find_inline_image(parts)
    if image is None:
        raise NoImageReturnedError("Background removal failed to produce an image.")
    return {"image": f"data:{image['mimeType']};base64,{image['data']}"}


def apply_design(client: GeminiClient, params: ApplyDesignParams) -> dict:
    """Composite a design onto a blank product mockup.

    Returns:
        `{"image": <base64>}` without a data-URI prefix.
    """
    response = client.generate_content(
        client.config.image_edit_model,
        [
            inline_part(MOCKUP_MIME_TYPE, params.blank_mockup_base64),
            inline_part(params.design_mime_type, params.design_base64),
            text_part(build_apply_design_prompt(params.product_name)),
        ],
        generation_config=IMAGE_AND_TEXT,
    )

    parts = first_candidate_parts(response)
    if not parts:
        raise NoImageReturnedError(
            "Applying the design failed. The AI did not return an image, "
            "which might be due to a safety filter."
        )

    image = find_inline_image(parts)
    if image is None:
        raise NoImageReturnedError("Image editing failed to produce an image.")
    return {"image": image["data"]}
