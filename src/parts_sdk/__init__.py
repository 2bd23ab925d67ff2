"""Parts SDK - async Python client for the parts inventory API.

The client composes four replaceable pieces:
- Transport (httpx) performing single requests
- Authentication strategy (none, bearer token, API key, basic)
- Retry strategy (none, fixed delay, exponential backoff)
- Response transformer (ISO-8601 date fields to datetime)

Example:
    ```python
    from parts_sdk import SearchPartsDTO, create_client

    async with create_client(environment="production", api_key=api_key) as client:
        page = await client.search_parts(SearchPartsDTO(name="engine", category="Automotive"))
        for part in page.parts:
            print(part.part_number, part.created_at)
    ```
"""

from parts_sdk.builder import PartsAPIClientBuilder
from parts_sdk.client import PartsAPI, PartsAPIClient
from parts_sdk.config import API_ENVIRONMENTS, APIEnvironment, PartsAPIConfig, get_api_config
from parts_sdk.factory import (
    create_client,
    create_development_client,
    create_mock_client,
    create_production_client,
    create_simple_client,
)
from parts_sdk.models import (
    CreatePartDTO,
    PartDTO,
    PartStatus,
    SearchPartsDTO,
    SearchPartsResponseDTO,
    UpdatePartDTO,
)
from parts_sdk.transport.cancellation import CancellationToken

__version__ = "0.1.0"

__all__ = [
    "API_ENVIRONMENTS",
    "APIEnvironment",
    "CancellationToken",
    "CreatePartDTO",
    "PartDTO",
    "PartStatus",
    "PartsAPI",
    "PartsAPIClient",
    "PartsAPIClientBuilder",
    "PartsAPIConfig",
    "SearchPartsDTO",
    "SearchPartsResponseDTO",
    "UpdatePartDTO",
    "__version__",
    "create_client",
    "create_development_client",
    "create_mock_client",
    "create_production_client",
    "create_simple_client",
    "get_api_config",
]
