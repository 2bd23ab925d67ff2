"""Fluent builder for ``PartsAPIClient``."""

from parts_sdk.auth.strategies import (
    ApiKeyAuthStrategy,
    AuthenticationStrategy,
    BasicAuthStrategy,
    BearerTokenAuthStrategy,
    NoAuthStrategy,
)
from parts_sdk.client import DEFAULT_TIMEOUT, PartsAPIClient
from parts_sdk.transformers import CompositeTransformer, DataTransformer, DateTransformer, IdentityTransformer
from parts_sdk.transport.base import HttpClient
from parts_sdk.transport.httpx_client import HttpxHttpClient
from parts_sdk.transport.retry import (
    ExponentialBackoffRetryStrategy,
    FixedDelayRetryStrategy,
    NoRetryStrategy,
    RetryStrategy,
)


class PartsAPIClientBuilder:
    """Assemble a client step by step.

    Defaults: httpx transport, exponential backoff (3 attempts, 1s base,
    10s cap), no authentication, date transformation, 5s timeout. The
    transport is created in ``build()`` unless one was set.

    Example:
        ```python
        client = (
            PartsAPIClientBuilder()
            .set_base_url("https://api.partsy.com/v1")
            .with_api_key("secret")
            .with_fixed_delay_retry(max_attempts=5, delay=0.5)
            .build()
        )
        ```
    """

    def __init__(self) -> None:
        self._base_url = ""
        self._http_client: HttpClient | None = None
        self._retry_strategy: RetryStrategy = ExponentialBackoffRetryStrategy()
        self._auth_strategy: AuthenticationStrategy = NoAuthStrategy()
        self._data_transformer: DataTransformer = DateTransformer()
        self._timeout = DEFAULT_TIMEOUT

    def set_base_url(self, url: str) -> "PartsAPIClientBuilder":
        self._base_url = url
        return self

    def set_http_client(self, client: HttpClient) -> "PartsAPIClientBuilder":
        self._http_client = client
        return self

    def with_timeout(self, timeout: float) -> "PartsAPIClientBuilder":
        self._timeout = timeout
        return self

    def with_exponential_backoff_retry(
        self, max_attempts: int = 3, base_delay: float = 1.0, max_delay: float = 10.0
    ) -> "PartsAPIClientBuilder":
        self._retry_strategy = ExponentialBackoffRetryStrategy(max_attempts, base_delay, max_delay)
        return self

    def with_fixed_delay_retry(self, max_attempts: int = 3, delay: float = 1.0) -> "PartsAPIClientBuilder":
        self._retry_strategy = FixedDelayRetryStrategy(max_attempts, delay)
        return self

    def with_no_retry(self) -> "PartsAPIClientBuilder":
        self._retry_strategy = NoRetryStrategy()
        return self

    def set_retry_strategy(self, strategy: RetryStrategy) -> "PartsAPIClientBuilder":
        self._retry_strategy = strategy
        return self

    def with_bearer_token(self, token: str) -> "PartsAPIClientBuilder":
        self._auth_strategy = BearerTokenAuthStrategy(token)
        return self

    def with_api_key(self, api_key: str, header_name: str = "X-API-Key") -> "PartsAPIClientBuilder":
        self._auth_strategy = ApiKeyAuthStrategy(api_key, header_name)
        return self

    def with_basic_auth(self, username: str, password: str) -> "PartsAPIClientBuilder":
        self._auth_strategy = BasicAuthStrategy(username, password)
        return self

    def set_auth_strategy(self, strategy: AuthenticationStrategy) -> "PartsAPIClientBuilder":
        self._auth_strategy = strategy
        return self

    def with_date_transformation(self) -> "PartsAPIClientBuilder":
        self._data_transformer = DateTransformer()
        return self

    def with_no_transformation(self) -> "PartsAPIClientBuilder":
        self._data_transformer = IdentityTransformer()
        return self

    def with_transformers(self, *transformers: DataTransformer) -> "PartsAPIClientBuilder":
        self._data_transformer = CompositeTransformer(transformers)
        return self

    def set_data_transformer(self, transformer: DataTransformer) -> "PartsAPIClientBuilder":
        self._data_transformer = transformer
        return self

    def build(self) -> PartsAPIClient:
        """Create the client.

        Raises:
            ValueError: No base URL was set.
        """
        if not self._base_url:
            raise ValueError("Base URL is required. Use set_base_url() to configure it.")

        return PartsAPIClient(
            base_url=self._base_url,
            http_client=self._http_client if self._http_client is not None else HttpxHttpClient(),
            retry_strategy=self._retry_strategy,
            auth_strategy=self._auth_strategy,
            data_transformer=self._data_transformer,
            timeout=self._timeout,
        )
