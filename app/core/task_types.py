"""Parameter contracts for the dispatcher tasks.

Architectural role:
    Declares one pydantic model per task describing the `params` object the
    caller sends. The dispatcher validates `params` against the task's model
    before a client is built, so malformed input never reaches the provider.

Wire format:
    Field names on the wire are camelCase (`numberOfImages`, `mimeType`, ...).
    Models expose snake_case attributes and accept either spelling.

Validation:
    - Image MIME types must be `image/*`.
    - Base64 payloads must decode under strict base64 rules.
    - `numberOfImages` is bounded by the Imagen per-call limit.
"""

import base64
import binascii
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

TaskName = Literal[
    "generateImage",
    "removeBackground",
    "applyDesign",
    "generateSeo",
    "generateAltText",
]

MAX_IMAGES_PER_CALL = 4


def _check_image_mime(value: str) -> str:
    value = value.strip()
    if not value.startswith("image/") or value == "image/":
        raise ValueError("must be an image MIME type such as 'image/png'")
    return value


def _check_base64(value: str) -> str:
    if not value:
        raise ValueError("must not be empty")
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("must be valid base64-encoded data")
    return value


class TaskParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GenerateImageParams(TaskParams):
    prompt: str = Field(min_length=1)
    number_of_images: int = Field(alias="numberOfImages", ge=1, le=MAX_IMAGES_PER_CALL)


class InlineImageParams(TaskParams):
    """An image sent inline as MIME type plus base64 data."""

    mime_type: str = Field(alias="mimeType")
    data: str

    @field_validator("mime_type")
    @classmethod
    def check_mime_type(cls, value: str) -> str:
        return _check_image_mime(value)

    @field_validator("data")
    @classmethod
    def check_data(cls, value: str) -> str:
        return _check_base64(value)


class RemoveBackgroundParams(InlineImageParams):
    pass


class GenerateAltTextParams(InlineImageParams):
    pass


class ApplyDesignParams(TaskParams):
    # The mockup is always sent to the provider as PNG.
    blank_mockup_base64: str = Field(alias="blankMockupBase64")
    design_mime_type: str = Field(alias="designMimeType")
    design_base64: str = Field(alias="designBase64")
    product_name: str = Field(alias="productName", min_length=1)

    @field_validator("design_mime_type")
    @classmethod
    def check_mime_type(cls, value: str) -> str:
        return _check_image_mime(value)

    @field_validator("blank_mockup_base64", "design_base64")
    @classmethod
    def check_data(cls, value: str) -> str:
        return _check_base64(value)


class GenerateSeoParams(TaskParams):
    product_name: str = Field(alias="productName", min_length=1)
    design_description: str = Field(alias="designDescription")
