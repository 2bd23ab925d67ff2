"""Request/response descriptors and the transport contract."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from parts_sdk.transport.cancellation import CancellationToken

JSON_CONTENT_TYPES = ("application/json", "+json")


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass(frozen=True)
class HttpRequest:
    """A single outgoing request, built fresh for every attempt."""

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: float = 5.0  # seconds


@dataclass(frozen=True)
class HttpResponse:
    """A decoded response as produced by the transport."""

    status_code: int
    status_text: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None

    @property
    def is_success(self) -> bool:
        return self.status_code < 400

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    @property
    def content_type(self) -> str:
        return (self.header("content-type") or "").lower()

    @property
    def is_json(self) -> bool:
        return any(marker in self.content_type for marker in JSON_CONTENT_TYPES)


class HttpClient(Protocol):
    """Performs exactly one HTTP request per call."""

    async def request(
        self, request: HttpRequest, *, cancel_token: "CancellationToken | None" = None
    ) -> HttpResponse: ...

    async def aclose(self) -> None: ...
