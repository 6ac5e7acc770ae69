"""
This module defines the exception classes used throughout the test-automation generator.
Every failure a generation request can end in is one of these classes, and each class
carries the typed error kind, the HTTP status and the message that is safe to show to the
caller. Details meant for operators only (upstream status and body) are kept separately.
"""

class GenerationError(Exception):
    """Base class for every expected failure of a generation request."""
    kind = "InternalError"
    status_code = 500
    user_message = None

    def __init__(self, message: str = "", detail: str | None = None):
        super().__init__(message or self.user_message or self.kind)
        self.detail = detail

class PayloadValidationError(GenerationError):
    """Raised when the request body is missing data or exceeds the size limits."""
    kind = "ValidationError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.user_message = message

class ConfigError(GenerationError):
    """Raised when the deployment is misconfigured, e.g. the AI gateway key is missing."""
    kind = "ConfigError"
    user_message = "Service configuration error. Please try again later."

class LLMError(GenerationError):
    """Base class for errors raised while talking to the AI gateway."""
    kind = "UpstreamError"

class UpstreamRateLimitError(LLMError):
    """Raised when the AI gateway answers 429."""
    kind = "UpstreamRateLimit"
    status_code = 429
    user_message = "AI Generation limit reached. Please try again later."

class UpstreamPaymentRequiredError(LLMError):
    """Raised when the AI gateway answers 402."""
    kind = "UpstreamPaymentRequired"
    status_code = 402
    user_message = "Payment required. Please add credits to your workspace."

class UpstreamError(LLMError):
    """Raised for any other gateway failure: non-2xx status, transport error, bad JSON."""
    kind = "UpstreamError"

    def __init__(self, message: str = "", detail: str | None = None, status: int | None = None):
        super().__init__(message, detail)
        self.status = status

class EmptyResponseError(LLMError):
    """Raised when the completion holds no usable text."""
    kind = "EmptyResponse"
