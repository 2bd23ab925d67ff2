"""Testing utilities for code that uses the parts client.

Modules:
    mock_client: In-memory MockPartsAPIClient
    factories: Payload/response factories and a recording MockTransport handler

Example:
    ```python
    import httpx

    from parts_sdk.testing import RecordingHandler, create_error_response


    async def test_handles_404():
        handler = RecordingHandler([create_error_response(404, "Part not found")])
        client = (
            PartsAPIClientBuilder()
            .set_base_url("https://api.example.com")
            .set_http_client(HttpxHttpClient(transport=httpx.MockTransport(handler)))
            .build()
        )
        ...
    ```
"""

from parts_sdk.testing.factories import (
    RecordingHandler,
    create_error_response,
    create_json_response,
    create_part_payload,
)
from parts_sdk.testing.mock_client import MockPartsAPIClient, sample_parts

__all__ = [
    "MockPartsAPIClient",
    "RecordingHandler",
    "create_error_response",
    "create_json_response",
    "create_part_payload",
    "sample_parts",
]
