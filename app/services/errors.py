"""Error taxonomy for the resume tools API.

Every error carries the HTTP status it maps to and the message shown to the
caller. The exception handler registered in ``app.server`` turns them into
``{"error": message}`` responses.
"""
from typing import Optional


class ResumeToolsError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def http_status(self) -> int:
        return self.status_code

    def user_message(self) -> str:
        return self.message


class ConfigurationError(ResumeToolsError):
    """Gemini credential is not configured."""

    status_code = 500


class ValidationError(ResumeToolsError):
    """Missing or invalid request fields."""

    status_code = 400


class PdfExtractionError(ResumeToolsError):
    status_code = 400


class MalformedResponseError(ResumeToolsError):
    """Gemini answered successfully but without a candidate carrying text."""

    status_code = 500

    def user_message(self) -> str:
        return f"Analysis failed: {self.message}"


class BackendError(ResumeToolsError):
    """Non-success response from the completion service.

    The upstream status and message are both inspected: Gemini reports an
    invalid key as a 400 whose message mentions ``API_KEY``.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = status_code

    def is_auth_failure(self) -> bool:
        return self.upstream_status in (401, 403) or "API_KEY" in self.message

    def is_quota_exceeded(self) -> bool:
        return self.upstream_status == 429 or "quota" in self.message.lower()

    def http_status(self) -> int:
        if self.is_auth_failure():
            return 401
        if self.is_quota_exceeded():
            return 429
        return 500

    def user_message(self) -> str:
        if self.is_auth_failure():
            return "Invalid API key. Please check your Gemini API key."
        if self.is_quota_exceeded():
            return "API quota exceeded. Please try again later."
        return f"Analysis failed: {self.message}"
