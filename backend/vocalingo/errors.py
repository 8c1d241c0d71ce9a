"""Failure classes for a pronunciation check.

Each class carries the HTTP status and the fixed message the caller sees.
Internal detail stays on the exception (and in the logs), never in the body.
"""

VALIDATION_ERROR_MESSAGE = "Target word, spoken word, and language are all required"
MALFORMED_RESPONSE_MESSAGE = "Error parsing API response"
PROCESSING_ERROR_MESSAGE = "Error processing pronunciation check"


class PronunciationCheckError(Exception):
    status_code: int = 500
    message: str = PROCESSING_ERROR_MESSAGE

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)
        self.detail = detail


class ValidationError(PronunciationCheckError):
    """The request is missing one or more of the required fields."""

    status_code = 400
    message = VALIDATION_ERROR_MESSAGE


class UpstreamError(PronunciationCheckError):
    """The generative-text service could not produce a completion."""

    message = PROCESSING_ERROR_MESSAGE


class MalformedResponseError(PronunciationCheckError):
    """The completion was not valid feedback JSON after fence stripping."""

    message = MALFORMED_RESPONSE_MESSAGE
