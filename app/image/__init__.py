"""Image task package.

Scope:
    Handlers for the tasks whose result is one or more images: Imagen
    generation, background removal and design compositing.

Non-goals:
    - No local image decoding, resizing or format conversion.
    - No temporary-file creation.
"""
