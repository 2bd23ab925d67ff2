"""Structured exceptions for the parts API client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parts_sdk.errors.models import ProblemDetail
    from parts_sdk.transport.base import HttpResponse


class PartsSDKError(Exception):
    """Base exception for every failure surfaced by the SDK."""

    pass


class NetworkError(PartsSDKError):
    """No response was received (connection failure, timeout, cancellation)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class RequestTimeoutError(NetworkError):
    """The request did not complete within its timeout."""

    pass


class RequestCancelledError(NetworkError):
    """The request or the delay before it was cancelled by the caller."""

    pass


class APIError(PartsSDKError):
    """A response was received with an error status (>= 400)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_text: str | None = None,
        response: "HttpResponse | None" = None,
        problem_detail: "ProblemDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.response = response
        self.problem_detail = problem_detail


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity (server-side validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class DecodeError(PartsSDKError):
    """Response body was expected to be JSON but could not be decoded."""

    def __init__(self, message: str, response: "HttpResponse | None" = None):
        super().__init__(message)
        self.response = response


class ValidationError(PartsSDKError):
    """Input rejected before any request was sent."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None):
        super().__init__(message)
        self.field = field
        self.code = code


class RetryExhaustedError(PartsSDKError):
    """The attempt budget ran out without a decisive outcome."""

    def __init__(self, message: str, attempts: int, last_error: Exception | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error
