"""Application errors rendered as ``{error, message}`` JSON bodies."""

from __future__ import annotations


class MarketingAPIException(Exception):
    """Base error carrying an HTTP status and a client-safe message."""

    status_code = 500
    error = "Something went wrong!"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RequestValidationFailed(MarketingAPIException):
    """Raised when the submitted product details are incomplete or invalid."""

    status_code = 400
    error = "Validation failed"


class TextGenerationError(MarketingAPIException):
    """Raised when the text provider cannot produce marketing copy."""

    status_code = 502
    error = "Text generation failed"
