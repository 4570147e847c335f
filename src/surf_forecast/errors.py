"""Error types raised by the forecast client."""

from typing import Optional


class InternalError(Exception):
    """Base class for errors raised by this package.

    Carries an HTTP-like ``code`` so a service layer can map it to a response
    without knowing the concrete error type.
    """

    def __init__(self, message: str, code: int = 500, description: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.description = description


class ClientRequestError(InternalError):
    """Raised when StormGlass could not be reached at all."""

    def __init__(self, message: str):
        internal_message = "Unexpected error when trying to communicate to StormGlass"
        super().__init__(f"{internal_message}: {message}")


class StormGlassResponseError(InternalError):
    """Raised when StormGlass answered with an error status."""

    def __init__(self, body: str, status_code: int):
        stormglass_message = "Unexpected error returned by the StormGlass Service"
        super().__init__(f"{stormglass_message}: Error: {body} Code: {status_code}")
        self.body = body
        self.status_code = status_code


class StormGlassUnexpectedResponseError(InternalError):
    """Raised when a successful StormGlass response has an unusable body."""
