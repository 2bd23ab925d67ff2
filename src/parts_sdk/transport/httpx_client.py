"""httpx-backed transport.

Executes exactly one request per call and turns the result into an
``HttpResponse``. Transport-level failures are mapped onto the SDK's
``NetworkError`` family; status codes are left for the caller to judge.

Example:
    ```python
    import httpx

    from parts_sdk.transport import HttpxHttpClient

    # Real network
    http_client = HttpxHttpClient()

    # In tests
    http_client = HttpxHttpClient(transport=httpx.MockTransport(handler))
    ```
"""

import logging

import httpx

from parts_sdk.errors.exceptions import DecodeError, NetworkError, RequestTimeoutError
from parts_sdk.transport.base import HttpRequest, HttpResponse
from parts_sdk.transport.cancellation import CancellationToken

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Accept": "application/json"}


class HttpxHttpClient:
    """Transport that sends requests through an ``httpx.AsyncClient``.

    Args:
        client: An existing client to reuse. It is not closed by ``aclose``.
        transport: Transport for a client created here (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if client is not None and transport is not None:
            raise ValueError("Pass either client or transport, not both")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self, request: HttpRequest, *, cancel_token: CancellationToken | None = None
    ) -> HttpResponse:
        """Send one request and decode its body.

        Raises:
            RequestTimeoutError: The request timed out.
            NetworkError: Connection-level failure.
            RequestCancelledError: ``cancel_token`` fired mid-flight.
            DecodeError: JSON content type with an unparseable body.
        """
        headers = dict(DEFAULT_HEADERS)
        if request.body is not None:
            headers["Content-Type"] = "application/json"
        headers.update(request.headers)

        send = self._client.request(
            str(request.method),
            request.url,
            headers=headers,
            json=request.body,
            timeout=httpx.Timeout(request.timeout),
        )

        try:
            if cancel_token is None:
                response = await send
            else:
                response = await cancel_token.run(send)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                f"Request {request.method} {request.url} timed out after {request.timeout}s",
                url=request.url,
            ) from e
        except httpx.TransportError as e:
            raise NetworkError(
                f"Network connection failed for {request.method} {request.url}: {e}",
                url=request.url,
            ) from e

        return self._to_response(request, response)

    def _to_response(self, request: HttpRequest, response: httpx.Response) -> HttpResponse:
        content_type = response.headers.get("content-type", "")
        body = None

        if "json" in content_type.lower() and response.content:
            try:
                body = response.json()
            except ValueError as e:
                if response.is_success:
                    raise DecodeError(
                        f"Invalid JSON in response to {request.method} {request.url}: {e}"
                    ) from e
                # The status is the failure to report; keep the raw text for its message
                body = response.text
        elif response.content and not response.is_success:
            # Keep plain-text error bodies so the error message can carry them
            body = response.text

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        return HttpResponse(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            body=body,
        )
