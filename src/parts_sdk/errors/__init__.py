"""Typed errors and RFC 7807 support for the parts API client."""

from parts_sdk.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    NetworkError,
    NotFoundError,
    PartsSDKError,
    RateLimitError,
    RequestCancelledError,
    RequestTimeoutError,
    RetryExhaustedError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
    ValidationError,
)
from parts_sdk.errors.handler import exception_class_for_status, raise_for_status
from parts_sdk.errors.models import ProblemDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "DecodeError",
    "ForbiddenError",
    "NetworkError",
    "NotFoundError",
    "PartsSDKError",
    "ProblemDetail",
    "RateLimitError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "RetryExhaustedError",
    "ServerError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "ValidationError",
    "exception_class_for_status",
    "raise_for_status",
]
