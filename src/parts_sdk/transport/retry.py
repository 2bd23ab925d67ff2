"""Retry strategies for the parts API client.

A retry strategy only decides; the client loop does the sleeping. Each
strategy answers three questions: should a failed attempt be retried, how
long to wait first, and how many attempts are allowed in total.

## When to Use Each Strategy

| Strategy | 4xx | 5xx / network errors | Delay |
|----------|-----|----------------------|-------|
| `NoRetryStrategy` | ❌ | ❌ | - |
| `FixedDelayRetryStrategy` | ❌ | ✅ up to `max_attempts` | constant |
| `ExponentialBackoffRetryStrategy` | ❌ | ✅ up to `max_attempts` | `base_delay * 2**(attempt-1)`, capped |

429 is a 4xx and is never retried.

## Example

```python
from parts_sdk.transport.retry import ExponentialBackoffRetryStrategy

strategy = ExponentialBackoffRetryStrategy(max_attempts=3, base_delay=1.0, max_delay=10.0)
strategy.get_retry_delay(1)  # 1.0
strategy.get_retry_delay(2)  # 2.0
```
"""

from abc import ABC, abstractmethod

from parts_sdk.errors.exceptions import APIError, NetworkError


def is_retryable_error(error: Exception) -> bool:
    """Return True for failures a later attempt might not repeat.

    Server errors (5xx) and transport failures qualify. Client errors (4xx),
    decode failures and input validation failures do not.
    """
    if isinstance(error, APIError) and error.status_code:
        return error.status_code >= 500
    return isinstance(error, NetworkError)


class RetryStrategy(ABC):
    """Decides whether and when a failed attempt is retried."""

    @property
    @abstractmethod
    def max_attempts(self) -> int:
        """Total number of attempts allowed, the first one included."""

    @abstractmethod
    def should_retry(self, attempt: int, error: Exception) -> bool:
        """Decide after ``attempt`` (1-indexed) failed with ``error``."""

    @abstractmethod
    def get_retry_delay(self, attempt: int) -> float:
        """Seconds to wait after ``attempt`` before the next one."""


class NoRetryStrategy(RetryStrategy):
    """Single attempt, failures surface immediately."""

    @property
    def max_attempts(self) -> int:
        return 1

    def should_retry(self, attempt: int, error: Exception) -> bool:
        return False

    def get_retry_delay(self, attempt: int) -> float:
        return 0.0


class FixedDelayRetryStrategy(RetryStrategy):
    """Retry server and network failures with a constant delay.

    Args:
        max_attempts: Total attempts, the first one included (default: 3)
        delay: Seconds between attempts (default: 1.0)
    """

    def __init__(self, max_attempts: int = 3, delay: float = 1.0) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self._max_attempts = max_attempts
        self.delay = delay

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def should_retry(self, attempt: int, error: Exception) -> bool:
        if attempt >= self._max_attempts:
            return False
        return is_retryable_error(error)

    def get_retry_delay(self, attempt: int) -> float:
        return self.delay


class ExponentialBackoffRetryStrategy(RetryStrategy):
    """Retry server and network failures with capped exponential backoff.

    Uses formula: min(base_delay * (2 ** (attempt - 1)), max_delay)
    Default backoff sequence: 1, 2, 4, 8, 10, 10... seconds

    Args:
        max_attempts: Total attempts, the first one included (default: 3)
        base_delay: Delay after the first attempt in seconds (default: 1.0)
        max_delay: Upper bound for any delay in seconds (default: 10.0)
    """

    def __init__(self, max_attempts: int = 3, base_delay: float = 1.0, max_delay: float = 10.0) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if base_delay < 0:
            raise ValueError(f"base_delay must not be negative, got {base_delay}")
        if max_delay < base_delay:
            raise ValueError(f"max_delay ({max_delay}) must be >= base_delay ({base_delay})")
        self._max_attempts = max_attempts
        self.base_delay = base_delay
        self.max_delay = max_delay

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def should_retry(self, attempt: int, error: Exception) -> bool:
        if attempt >= self._max_attempts:
            return False
        return is_retryable_error(error)

    def get_retry_delay(self, attempt: int) -> float:
        delay = self.base_delay * (2 ** (max(attempt, 1) - 1))
        return min(delay, self.max_delay)
