"""Factory functions for common client configurations.

Example:
    ```python
    from parts_sdk.factory import create_client, create_production_client

    # Preset + overrides
    client = create_client(environment="staging", api_key="secret")

    # Everything from PARTS_API_* variables and .env
    client = create_client()
    ```
"""

from parts_sdk.builder import PartsAPIClientBuilder
from parts_sdk.client import PartsAPIClient
from parts_sdk.config import PartsAPIConfig
from parts_sdk.testing.mock_client import MockPartsAPIClient
from parts_sdk.transport.base import HttpClient


def create_simple_client(base_url: str, api_key: str | None = None) -> PartsAPIClient:
    """Exponential backoff, date transformation, bearer auth when a key is given."""
    builder = PartsAPIClientBuilder().set_base_url(base_url).with_date_transformation().with_exponential_backoff_retry()
    if api_key:
        builder.with_bearer_token(api_key)
    return builder.build()


def create_production_client(base_url: str, api_key: str) -> PartsAPIClient:
    """Bearer auth (required) with exponential backoff of 3 attempts, 1s base, 10s cap."""
    return (
        PartsAPIClientBuilder()
        .set_base_url(base_url)
        .with_bearer_token(api_key)
        .with_exponential_backoff_retry(3, 1.0, 10.0)
        .with_date_transformation()
        .build()
    )


def create_development_client(base_url: str, api_key: str | None = None) -> PartsAPIClient:
    """No retries, so failures show up immediately."""
    builder = PartsAPIClientBuilder().set_base_url(base_url).with_no_retry().with_date_transformation()
    if api_key:
        builder.with_bearer_token(api_key)
    return builder.build()


def create_mock_client(network_delay: float = 0.3) -> MockPartsAPIClient:
    """In-memory client seeded with sample parts; no network involved."""
    return MockPartsAPIClient(network_delay=network_delay)


def create_client(
    config: PartsAPIConfig | None = None,
    *,
    environment: str | None = None,
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    retry_attempts: int | None = None,
    http_client: HttpClient | None = None,
) -> PartsAPIClient:
    """Build a client from a configuration.

    With ``config`` given it is used as-is. With ``environment`` given the
    named preset is combined with the keyword overrides. With neither, the
    configuration comes from ``PartsAPIConfig.from_env()`` and the keyword
    overrides are still applied on top.
    """
    if config is None:
        if environment is None:
            base = PartsAPIConfig.from_env()
            config = PartsAPIConfig(
                base_url=base_url or base.base_url,
                api_key=api_key or base.api_key,
                timeout=timeout if timeout is not None else base.timeout,
                retry_attempts=retry_attempts if retry_attempts is not None else base.retry_attempts,
                retry_delay=base.retry_delay,
            )
        else:
            config = PartsAPIConfig.from_environment(
                environment,
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                retry_attempts=retry_attempts,
            )

    builder = (
        PartsAPIClientBuilder()
        .set_base_url(config.base_url)
        .with_timeout(config.timeout)
        .with_exponential_backoff_retry(
            max_attempts=config.retry_attempts,
            base_delay=config.retry_delay,
            max_delay=max(10.0, config.retry_delay),
        )
        .with_date_transformation()
    )
    if config.api_key:
        builder.with_bearer_token(config.api_key)
    if http_client is not None:
        builder.set_http_client(http_client)
    return builder.build()
