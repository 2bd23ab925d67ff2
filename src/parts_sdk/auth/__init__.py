"""Authentication for the parts API client.

- Header strategies: none, bearer token, API key, basic auth
- Credential resolution (value → env → .env → default)

Example:
    ```python
    from parts_sdk.auth import BearerTokenAuthStrategy, CredentialResolver

    api_key = CredentialResolver().resolve_api_key(required=True)
    auth = BearerTokenAuthStrategy(api_key)
    ```
"""

from parts_sdk.auth.credentials import CredentialResolver
from parts_sdk.auth.exceptions import (
    AuthConfigurationError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from parts_sdk.auth.strategies import (
    ApiKeyAuthStrategy,
    AuthenticationStrategy,
    BasicAuthStrategy,
    BearerTokenAuthStrategy,
    NoAuthStrategy,
)

__all__ = [
    "ApiKeyAuthStrategy",
    "AuthConfigurationError",
    "AuthenticationStrategy",
    "BasicAuthStrategy",
    "BearerTokenAuthStrategy",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "NoAuthStrategy",
]
