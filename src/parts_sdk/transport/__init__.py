"""Transport layer: request/response descriptors, the httpx transport,
cancellation and retry strategies.

Modules:
    base: HttpRequest, HttpResponse and the HttpClient protocol
    httpx_client: httpx-backed HttpClient implementation
    cancellation: CancellationToken threaded through requests and delays
    retry: Retry strategies consumed by the client loop

Example:
    ```python
    from parts_sdk.transport import ExponentialBackoffRetryStrategy, HttpxHttpClient

    http_client = HttpxHttpClient()
    retry = ExponentialBackoffRetryStrategy(max_attempts=3)
    ```
"""

from parts_sdk.transport.base import HttpClient, HttpMethod, HttpRequest, HttpResponse
from parts_sdk.transport.cancellation import CancellationToken
from parts_sdk.transport.httpx_client import HttpxHttpClient
from parts_sdk.transport.retry import (
    ExponentialBackoffRetryStrategy,
    FixedDelayRetryStrategy,
    NoRetryStrategy,
    RetryStrategy,
    is_retryable_error,
)

__all__ = [
    "CancellationToken",
    "ExponentialBackoffRetryStrategy",
    "FixedDelayRetryStrategy",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxHttpClient",
    "NoRetryStrategy",
    "RetryStrategy",
    "is_retryable_error",
]
