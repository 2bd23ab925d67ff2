"""Authentication strategies that decorate outgoing request headers.

Every strategy is a pure function of the incoming header mapping: it returns
a new dict and never mutates its input, so one instance can be shared by any
number of concurrent requests.
"""

import base64
from abc import ABC, abstractmethod
from collections.abc import Mapping

from parts_sdk.auth.exceptions import AuthConfigurationError


class AuthenticationStrategy(ABC):
    """Adds credentials to a header mapping."""

    @abstractmethod
    def authenticate(self, headers: Mapping[str, str]) -> dict[str, str]:
        """Return a new header mapping carrying credentials."""


class NoAuthStrategy(AuthenticationStrategy):
    def authenticate(self, headers: Mapping[str, str]) -> dict[str, str]:
        return dict(headers)


class BearerTokenAuthStrategy(AuthenticationStrategy):
    """Sends ``Authorization: Bearer <token>``."""

    def __init__(self, token: str) -> None:
        if not token or not token.strip():
            raise AuthConfigurationError("Bearer token must not be empty")
        self._token = token

    def authenticate(self, headers: Mapping[str, str]) -> dict[str, str]:
        return {**headers, "Authorization": f"Bearer {self._token}"}

    def __repr__(self) -> str:
        return "BearerTokenAuthStrategy(token=***)"


class ApiKeyAuthStrategy(AuthenticationStrategy):
    """Sends the API key in a configurable header (``X-API-Key`` by default)."""

    def __init__(self, api_key: str, header_name: str = "X-API-Key") -> None:
        if not api_key or not api_key.strip():
            raise AuthConfigurationError("API key must not be empty")
        if not header_name or not header_name.strip():
            raise AuthConfigurationError("API key header name must not be empty")
        self._api_key = api_key
        self.header_name = header_name

    def authenticate(self, headers: Mapping[str, str]) -> dict[str, str]:
        return {**headers, self.header_name: self._api_key}

    def __repr__(self) -> str:
        return f"ApiKeyAuthStrategy(header_name={self.header_name!r}, api_key=***)"


class BasicAuthStrategy(AuthenticationStrategy):
    """Sends ``Authorization: Basic base64(username:password)``."""

    def __init__(self, username: str, password: str) -> None:
        if not username:
            raise AuthConfigurationError("Basic auth username must not be empty")
        if ":" in username:
            raise AuthConfigurationError("Basic auth username must not contain ':'")
        self.username = username
        self._password = password

    def authenticate(self, headers: Mapping[str, str]) -> dict[str, str]:
        raw = f"{self.username}:{self._password}".encode()
        credentials = base64.b64encode(raw).decode("ascii")
        return {**headers, "Authorization": f"Basic {credentials}"}

    def __repr__(self) -> str:
        return f"BasicAuthStrategy(username={self.username!r}, password=***)"
