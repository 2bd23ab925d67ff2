"""Environment presets and client configuration.

Durations are in seconds.

Example:
    ```python
    from parts_sdk.config import PartsAPIConfig, get_api_config

    get_api_config("production").base_url  # "https://api.partsy.com/v1"

    # PARTS_API_ENV, PARTS_API_BASE_URL, PARTS_API_KEY, ...
    config = PartsAPIConfig.from_env()
    ```
"""

import logging
import math
from dataclasses import dataclass

from parts_sdk.auth.credentials import CredentialResolver

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "development"
DEFAULT_TIMEOUT = 5.0
DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 1.0

ENV_VAR_ENVIRONMENT = "PARTS_API_ENV"
ENV_VAR_BASE_URL = "PARTS_API_BASE_URL"
ENV_VAR_TIMEOUT = "PARTS_API_TIMEOUT"
ENV_VAR_RETRY_ATTEMPTS = "PARTS_API_RETRY_ATTEMPTS"
ENV_VAR_RETRY_DELAY = "PARTS_API_RETRY_DELAY"


@dataclass(frozen=True)
class APIEnvironment:
    name: str
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS


API_ENVIRONMENTS: dict[str, APIEnvironment] = {
    "development": APIEnvironment(
        name="Development",
        base_url="http://localhost:8080/api/v1",
        timeout=10.0,
        retry_attempts=2,
    ),
    "staging": APIEnvironment(
        name="Staging",
        base_url="https://api-staging.partsy.com/v1",
        timeout=8.0,
        retry_attempts=3,
    ),
    "production": APIEnvironment(
        name="Production",
        base_url="https://api.partsy.com/v1",
        timeout=5.0,
        retry_attempts=3,
    ),
}


def get_api_config(env: str = DEFAULT_ENVIRONMENT) -> APIEnvironment:
    """Return the preset for ``env``, falling back to development."""
    environment = API_ENVIRONMENTS.get(env.lower())
    if environment is None:
        logger.warning(f"Unknown environment: {env}, falling back to {DEFAULT_ENVIRONMENT}")
        return API_ENVIRONMENTS[DEFAULT_ENVIRONMENT]
    return environment


@dataclass(frozen=True)
class PartsAPIConfig:
    base_url: str
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    retry_delay: float = DEFAULT_RETRY_DELAY

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url is required")
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number, got {self.timeout}")
        if self.retry_attempts < 1:
            raise ValueError(f"retry_attempts must be at least 1, got {self.retry_attempts}")
        if not math.isfinite(self.retry_delay) or self.retry_delay < 0:
            raise ValueError(f"retry_delay must be a non-negative number, got {self.retry_delay}")

    def __repr__(self) -> str:
        api_key = "***" if self.api_key else None
        return (
            f"PartsAPIConfig(base_url={self.base_url!r}, api_key={api_key!r}, timeout={self.timeout}, "
            f"retry_attempts={self.retry_attempts}, retry_delay={self.retry_delay})"
        )

    @classmethod
    def from_environment(
        cls,
        environment: str = DEFAULT_ENVIRONMENT,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        retry_attempts: int | None = None,
        retry_delay: float | None = None,
    ) -> "PartsAPIConfig":
        """Start from a named preset and apply explicit overrides."""
        preset = get_api_config(environment)
        return cls(
            base_url=base_url or preset.base_url,
            api_key=api_key,
            timeout=timeout if timeout is not None else preset.timeout,
            retry_attempts=retry_attempts if retry_attempts is not None else preset.retry_attempts,
            retry_delay=retry_delay if retry_delay is not None else DEFAULT_RETRY_DELAY,
        )

    @classmethod
    def from_env(
        cls, environment: str | None = None, *, resolver: CredentialResolver | None = None
    ) -> "PartsAPIConfig":
        """Build a configuration from environment variables and .env.

        Raises:
            ValueError: A numeric variable could not be parsed.
        """
        resolver = resolver or CredentialResolver()
        env_name = resolver.resolve(
            value=environment, env_var_name=ENV_VAR_ENVIRONMENT, default=DEFAULT_ENVIRONMENT, mask_in_logs=False
        )

        return cls.from_environment(
            env_name,
            api_key=resolver.resolve_api_key(),
            base_url=resolver.resolve(env_var_name=ENV_VAR_BASE_URL, mask_in_logs=False),
            timeout=_parse_number(resolver, ENV_VAR_TIMEOUT, float),
            retry_attempts=_parse_number(resolver, ENV_VAR_RETRY_ATTEMPTS, int),
            retry_delay=_parse_number(resolver, ENV_VAR_RETRY_DELAY, float),
        )


def _parse_number(resolver: CredentialResolver, env_var_name: str, kind: type):
    raw = resolver.resolve(env_var_name=env_var_name, mask_in_logs=False)
    if raw is None or not raw.strip():
        return None
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{env_var_name} must be a {kind.__name__}, got {raw!r}") from None
