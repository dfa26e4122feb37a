"""Gemini access package.

Architectural role:
    Provides provider configuration, the REST transport, and the text-output
    task handlers used by the dispatcher.

Module split:
    - `provider_config`: environment-driven model and credential configuration.
    - `client`: Gemini REST transport and response-part helpers.
    - `service`: text-output handlers (`generateSeo`, `generateAltText`).
"""
