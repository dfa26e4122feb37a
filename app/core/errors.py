"""Exception taxonomy for task handlers and the provider transport.

Architectural role:
    Gives handlers explicit error types so the dispatcher can tell a provider
    transport failure apart from a provider answer that is unusable for the
    requested task. The dispatcher in `app.api.http_api` is the only place
    these are translated into HTTP responses.

Hierarchy:
    - `ProviderError`: HTTP/transport failure or non-2xx status from Gemini.
    - `ProviderContractError`: Gemini answered, but not with what the task needs.
        - `NoImageReturnedError`: no candidate, no parts, or no image data.
        - `UnexpectedFormatError`: structured output was not valid JSON.

Message contract:
    `str(exc)` is user-facing and is returned verbatim in the `error` field.
"""


class ProviderError(RuntimeError):
    """Gemini request failed at the transport or HTTP-status level.

    Attributes:
        status_code: HTTP status from the provider, or `None` when no response
            was received (connection error, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderContractError(RuntimeError):
    """Gemini returned a response that does not satisfy the task contract."""


class NoImageReturnedError(ProviderContractError):
    """Provider response carried no usable image."""


class UnexpectedFormatError(ProviderContractError):
    """Provider structured output could not be parsed."""
