"""Error handling utilities for HTTP responses."""

from typing import TYPE_CHECKING

from parts_sdk.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from parts_sdk.errors.models import ProblemDetail

if TYPE_CHECKING:
    from parts_sdk.transport.base import HttpResponse

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def exception_class_for_status(status_code: int) -> type[APIError]:
    """Return the exception class used for an HTTP error status."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def extract_error_message(response: "HttpResponse") -> str | None:
    """Pull a human-readable error message out of a decoded error body.

    Looks for ``message`` then ``error`` string fields, then falls back to
    the raw body when it is a non-empty string.
    """
    body = response.body
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    if isinstance(body, str) and body:
        return body[:200]
    return None


def raise_for_status(response: "HttpResponse") -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses RFC 7807 problem details if present, otherwise uses the
    ``message``/``error`` field of the body when there is one.

    Args:
        response: Response descriptor produced by the transport

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    exc_class = exception_class_for_status(status_code)
    problem_detail = ProblemDetail.from_response(response)

    message = f"API request failed: {status_code} {response.status_text}".rstrip()
    if problem_detail:
        message = f"{message}\n{problem_detail.to_exception_message()}"
    else:
        server_message = extract_error_message(response)
        if server_message:
            message = f"{message}: {server_message}"

    common = {
        "status_code": status_code,
        "status_text": response.status_text,
        "response": response,
        "problem_detail": problem_detail,
    }

    if exc_class is RateLimitError:
        retry_after = None
        header = response.header("retry-after")
        if header is not None:
            try:
                retry_after = int(header)
            except ValueError:
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **common)

    if exc_class is UnprocessableEntityError:
        validation_errors = None
        if problem_detail and problem_detail.extensions:
            # Explicit key check so an empty list is kept as-is
            if "errors" in problem_detail.extensions:
                validation_errors = problem_detail.extensions.get("errors")
            else:
                validation_errors = problem_detail.extensions.get("validation_errors")
        elif isinstance(response.body, dict) and isinstance(response.body.get("errors"), list):
            validation_errors = response.body["errors"]
        raise UnprocessableEntityError(message, validation_errors=validation_errors, **common)

    raise exc_class(message, **common)
