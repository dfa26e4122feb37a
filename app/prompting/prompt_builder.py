"""Prompt and schema builders for the task handlers.

This module only builds instruction strings and the structured-output schema.
Request assembly, provider calls and response parsing happen in the handlers.

Design constraints:
    - Deterministic construction for identical inputs.
    - No I/O, no global state mutation.

Prompt safety model:
    - Product names and design descriptions are interpolated as raw strings.
    - Length/count limits for the SEO listing are instruction-led (embedded in
      schema field descriptions) and are not re-checked on the response.
"""


# =========================================================
# FIXED IMAGE INSTRUCTIONS
# =========================================================

REMOVE_BACKGROUND_PROMPT = (
    "Remove the background from this image, leaving only the main subject. "
    "The background should be transparent, resulting in a PNG with an alpha channel."
)

ALT_TEXT_PROMPT = (
    "Generate a concise, ADA-compliant alt text for this image. "
    "Describe the product, the design on it, and the overall style of the mockup photo."
)


# =========================================================
# APPLY DESIGN
# =========================================================
# Part order in the request is fixed: mockup first, artwork second, this
# instruction last. The wording refers to the images by that position.

def build_apply_design_prompt(product_name: str) -> str:
    return (
        f"Apply the second image (the artwork) onto the {product_name} in the first image "
        "(the mockup). The artwork should be placed naturally on the product, following its "
        "contours, shadows, and texture for a photorealistic result. Make sure the applied "
        "design is clearly visible and well-integrated."
    )


# =========================================================
# SEO LISTING
# =========================================================

def build_seo_prompt(product_name: str, design_description: str) -> str:
    """Build the SEO listing prompt.

    Detailed length and count rules live in the schema field descriptions
    (`build_seo_schema`), which the model follows more reliably.
    """
    return (
        f"Generate an SEO-optimized product listing for a {product_name} "
        f"with a design described as: {design_description}."
    )


def build_seo_schema(product_name: str) -> dict:
    """Build the `responseSchema` for the SEO listing.

    Returns:
        OpenAPI-subset schema object with four required fields:
        `title`, `description`, `features`, `tags`.
    """
    return {
        "type": "OBJECT",
        "properties": {
            "title": {
                "type": "STRING",
                "description": (
                    f"A catchy, SEO-friendly product title for a {product_name}. "
                    "The title must be under 80 characters."
                ),
            },
            "description": {
                "type": "STRING",
                "description": (
                    "A detailed and compelling product description between 200 and 300 words. "
                    "It should highlight the product's benefits and appeal to potential "
                    "customers, written in a friendly, persuasive tone."
                ),
            },
            "features": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": f"A bulleted list of 3 to 5 key features of the {product_name}.",
            },
            "tags": {
                "type": "ARRAY",
                "items": {"type": "STRING"},
                "description": (
                    "A list of 10 to 15 relevant SEO tags or keywords that a user might "
                    f"search for to find this {product_name}."
                ),
            },
        },
        "required": ["title", "description", "features", "tags"],
    }
