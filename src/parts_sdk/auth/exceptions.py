"""Exceptions for credential resolution and authentication setup.

Example:
    ```python
    from parts_sdk.auth.exceptions import CredentialNotFoundError

    if not api_key:
        raise CredentialNotFoundError("API key not found", env_var_name="PARTS_API_KEY")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).

    Example:
        ```python
        try:
            api_key = resolver.resolve(env_var_name="PARTS_API_KEY", required=True)
        except CredentialNotFoundError as e:
            print(f"Missing credential: {e.env_var_name}")
        ```
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when credential file cannot be read."""

    pass


class AuthConfigurationError(CredentialError):
    """Raised when an authentication strategy is built with unusable settings.

    Example:
        ```python
        BearerTokenAuthStrategy("")  # raises AuthConfigurationError
        ```
    """

    pass
