"""Parts API client.

``PartsAPIClient`` runs each operation through the same loop: authenticate,
send one request, check the status, transform the body. Failures go to the
retry strategy, which either ends the call or names a delay before the next
attempt.

Example:
    ```python
    from parts_sdk import PartsAPIClientBuilder, SearchPartsDTO

    async with (
        PartsAPIClientBuilder()
        .set_base_url("https://api.partsy.com/v1")
        .with_bearer_token(api_key)
        .build()
    ) as client:
        result = await client.search_parts(SearchPartsDTO(name="engine", limit=5))
    ```
"""

import asyncio
import logging
import math
from collections.abc import Callable
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from parts_sdk.auth.strategies import AuthenticationStrategy
from parts_sdk.errors.exceptions import DecodeError, PartsSDKError, RequestCancelledError, RetryExhaustedError
from parts_sdk.errors.handler import raise_for_status
from parts_sdk.models import (
    CreatePartDTO,
    PartDTO,
    SearchPartsDTO,
    SearchPartsResponseDTO,
    UpdatePartDTO,
    validate_part_id,
)
from parts_sdk.transformers import DataTransformer
from parts_sdk.transport.base import HttpClient, HttpMethod, HttpRequest
from parts_sdk.transport.cancellation import CancellationToken
from parts_sdk.transport.retry import RetryStrategy

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class PartsAPI(Protocol):
    """Operations offered by both the HTTP client and the in-memory mock."""

    async def search_parts(
        self, criteria: SearchPartsDTO, *, cancel_token: CancellationToken | None = None
    ) -> SearchPartsResponseDTO: ...

    async def get_part_by_id(
        self, part_id: str, *, cancel_token: CancellationToken | None = None
    ) -> PartDTO: ...

    async def create_part(
        self, dto: CreatePartDTO, *, cancel_token: CancellationToken | None = None
    ) -> PartDTO: ...

    async def update_part(
        self, part_id: str, dto: UpdatePartDTO, *, cancel_token: CancellationToken | None = None
    ) -> PartDTO: ...

    async def delete_part(self, part_id: str, *, cancel_token: CancellationToken | None = None) -> None: ...


class PartsAPIClient:
    """HTTP client for the parts backend.

    Holds only immutable configuration and stateless strategies, so one
    instance can serve any number of concurrent calls.

    Args:
        base_url: Backend root, e.g. ``https://api.partsy.com/v1``
        http_client: Transport performing single requests
        retry_strategy: Decides whether and when to retry
        auth_strategy: Adds credentials to every request
        data_transformer: Applied once to every successful response body
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        *,
        base_url: str,
        http_client: HttpClient,
        retry_strategy: RetryStrategy,
        auth_strategy: AuthenticationStrategy,
        data_transformer: DataTransformer,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"timeout must be a positive number, got {timeout}")
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.retry_strategy = retry_strategy
        self.auth_strategy = auth_strategy
        self.data_transformer = data_transformer
        self.timeout = timeout

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def search_parts(
        self, criteria: SearchPartsDTO, *, cancel_token: CancellationToken | None = None
    ) -> SearchPartsResponseDTO:
        criteria.validate()
        query = str(httpx.QueryParams(criteria.to_query_params()))
        path = f"/parts/search?{query}" if query else "/parts/search"
        return await self._execute_request(
            HttpMethod.GET, path, parse=SearchPartsResponseDTO.from_dict, cancel_token=cancel_token
        )

    async def get_part_by_id(self, part_id: str, *, cancel_token: CancellationToken | None = None) -> PartDTO:
        path = self._part_path(part_id)
        return await self._execute_request(HttpMethod.GET, path, parse=PartDTO.from_dict, cancel_token=cancel_token)

    async def create_part(self, dto: CreatePartDTO, *, cancel_token: CancellationToken | None = None) -> PartDTO:
        dto.validate()
        return await self._execute_request(
            HttpMethod.POST, "/parts", body=dto.to_payload(), parse=PartDTO.from_dict, cancel_token=cancel_token
        )

    async def update_part(
        self, part_id: str, dto: UpdatePartDTO, *, cancel_token: CancellationToken | None = None
    ) -> PartDTO:
        path = self._part_path(part_id)
        dto.validate()
        return await self._execute_request(
            HttpMethod.PUT, path, body=dto.to_payload(), parse=PartDTO.from_dict, cancel_token=cancel_token
        )

    async def delete_part(self, part_id: str, *, cancel_token: CancellationToken | None = None) -> None:
        path = self._part_path(part_id)
        await self._execute_request(HttpMethod.DELETE, path, expect_body=False, cancel_token=cancel_token)

    def _part_path(self, part_id: str) -> str:
        return f"/parts/{quote(validate_part_id(part_id), safe='')}"

    async def _execute_request(
        self,
        method: HttpMethod,
        path: str,
        *,
        body: Any = None,
        expect_body: bool = True,
        parse: Callable[[Any], Any] | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> Any:
        """Run one logical operation, retrying as the strategy allows.

        Returns:
            The transformed response body, mapped through ``parse`` when given
            (None when ``expect_body`` is False)
        """
        url = f"{self.base_url}{path}"
        max_attempts = self.retry_strategy.max_attempts
        last_error: PartsSDKError | None = None
        attempt = 1

        while attempt <= max_attempts:
            if cancel_token is not None:
                cancel_token.raise_if_cancelled()

            try:
                return await self._attempt(method, url, body, expect_body, parse, cancel_token)
            except RequestCancelledError:
                raise
            except PartsSDKError as e:
                last_error = e
                if not self.retry_strategy.should_retry(attempt, e):
                    logger.debug(f"{method} {url} failed on attempt {attempt}/{max_attempts}, not retrying: {e}")
                    raise

                delay = self.retry_strategy.get_retry_delay(attempt)
                logger.warning(
                    f"{method} {url} failed with {e}, retrying in {delay}s (attempt {attempt}/{max_attempts})"
                )
                if cancel_token is None:
                    await asyncio.sleep(delay)
                else:
                    await cancel_token.sleep(delay)
                attempt += 1

        raise RetryExhaustedError(
            f"{method} {url} failed after {max_attempts} attempts",
            attempts=max_attempts,
            last_error=last_error,
        ) from last_error

    async def _attempt(
        self,
        method: HttpMethod,
        url: str,
        body: Any,
        expect_body: bool,
        parse: Callable[[Any], Any] | None,
        cancel_token: CancellationToken | None,
    ) -> Any:
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = "application/json"

        request = HttpRequest(
            method=method,
            url=url,
            headers=self.auth_strategy.authenticate(headers),
            body=body,
            timeout=self.timeout,
        )
        response = await self.http_client.request(request, cancel_token=cancel_token)
        raise_for_status(response)

        if not expect_body:
            return None
        if not response.is_json or response.body is None:
            raise DecodeError(
                f"Expected a JSON body from {method} {url}, got content type "
                f"{response.content_type or 'none'} (status {response.status_code})",
                response=response,
            )
        data = self.data_transformer.transform(response.body)
        if parse is None:
            return data
        try:
            return parse(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise DecodeError(
                f"Unexpected response shape from {method} {url}: {type(e).__name__}: {e}",
                response=response,
            ) from e
