"""Response body transformers.

A transformer post-processes a decoded JSON body before the client maps it
onto DTOs. The client applies its transformer exactly once per response.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_DATE_FIELDS = ("createdAt", "updatedAt", "timestamp", "date")


class DataTransformer(ABC):
    @abstractmethod
    def transform(self, data: Any) -> Any:
        """Return the transformed value. Must not mutate ``data``."""


class IdentityTransformer(DataTransformer):
    def transform(self, data: Any) -> Any:
        return data


class DateTransformer(DataTransformer):
    """Convert ISO-8601 strings in known date fields to ``datetime``.

    Walks nested dicts and lists. A value is converted only when its key is one
    of ``date_fields`` and it is a string, so running the transformer on its own
    output changes nothing. Strings that fail to parse are left untouched.
    """

    def __init__(self, date_fields: Iterable[str] = DEFAULT_DATE_FIELDS) -> None:
        self.date_fields = frozenset(date_fields)

    def transform(self, data: Any) -> Any:
        if isinstance(data, list):
            return [self.transform(item) for item in data]
        if not isinstance(data, dict):
            return data

        result = {}
        for key, value in data.items():
            if key in self.date_fields and isinstance(value, str) and value:
                result[key] = self._parse(key, value)
            elif isinstance(value, (dict, list)):
                result[key] = self.transform(value)
            else:
                result[key] = value
        return result

    def _parse(self, key: str, value: str) -> datetime | str:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            logger.debug(f"Leaving unparseable date field {key!r} as string: {value!r}")
            return value
        # Values without an offset are UTC
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed


class CompositeTransformer(DataTransformer):
    """Apply transformers in order, each receiving the previous output."""

    def __init__(self, transformers: Iterable[DataTransformer]) -> None:
        self.transformers = tuple(transformers)

    def transform(self, data: Any) -> Any:
        for transformer in self.transformers:
            data = transformer.transform(data)
        return data
