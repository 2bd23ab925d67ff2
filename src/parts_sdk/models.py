"""Transfer objects exchanged with the parts backend.

The backend speaks camelCase JSON; these dataclasses use snake_case and
convert at the edges (``from_dict`` / ``to_payload``). Input DTOs validate
themselves so bad input is rejected before a request is sent.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from parts_sdk.errors.exceptions import ValidationError

MAX_PART_NUMBER_LENGTH = 50
MAX_NAME_LENGTH = 200


class PartStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"
    DISCONTINUED = "discontinued"

    @classmethod
    def parse(cls, value: "str | PartStatus") -> "PartStatus | str":
        """Parse a backend status, case-insensitively.

        Accepts ``low_stock`` as well as ``low-stock``. Unknown values are
        returned unchanged.
        """
        if isinstance(value, PartStatus):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            return value


def round_price(price: float) -> float:
    return round(float(price), 2)


def _validate_price(price: Any, field_name: str = "price") -> None:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValidationError("Price must be a number", field=field_name, code="invalid_type")
    if not math.isfinite(price):
        raise ValidationError("Price must be a valid number", field=field_name, code="not_finite")
    if price < 0:
        raise ValidationError("Price cannot be negative", field=field_name, code="negative")


def _validate_quantity(quantity: Any) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Quantity must be an integer", field="quantity", code="not_integer")
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative", field="quantity", code="negative")


def _validate_text(value: Any, field_name: str, label: str, max_length: int | None = None) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=field_name, code="required")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(
            f"{label} cannot exceed {max_length} characters", field=field_name, code="too_long"
        )


def validate_part_id(part_id: Any) -> str:
    """Return the stripped id or raise ``ValidationError``."""
    if not isinstance(part_id, str) or not part_id.strip():
        raise ValidationError("Part id cannot be empty", field="id", code="required")
    return part_id.strip()


@dataclass
class PartDTO:
    """A part as returned by the backend.

    ``created_at``/``updated_at`` hold ``datetime`` values when the client runs
    with date transformation (the default) and the raw strings otherwise.
    """

    id: str
    part_number: str
    name: str
    price: float
    quantity: int
    status: PartStatus | str
    category: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PartDTO":
        return cls(
            id=str(data["id"]),
            part_number=data["partNumber"],
            name=data["name"],
            description=data.get("description"),
            price=data["price"],
            quantity=data["quantity"],
            status=PartStatus.parse(data["status"]),
            category=data["category"],
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "partNumber": self.part_number,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
            "status": str(self.status),
            "category": self.category,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }
        if self.description is not None:
            result["description"] = self.description
        return result

    @property
    def is_in_stock(self) -> bool:
        return self.quantity > 0


def _iso(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat().replace("+00:00", "Z")
    return value


@dataclass
class CreatePartDTO:
    part_number: str
    name: str
    price: float
    quantity: int
    category: str
    description: str | None = None

    def validate(self) -> None:
        _validate_text(self.part_number, "partNumber", "Part number", MAX_PART_NUMBER_LENGTH)
        _validate_text(self.name, "name", "Part name", MAX_NAME_LENGTH)
        _validate_text(self.category, "category", "Category")
        _validate_price(self.price)
        _validate_quantity(self.quantity)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "partNumber": self.part_number,
            "name": self.name,
            "price": round_price(self.price),
            "quantity": self.quantity,
            "category": self.category,
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass
class UpdatePartDTO:
    """Partial update; only fields that are not None are sent."""

    part_number: str | None = None
    name: str | None = None
    description: str | None = None
    price: float | None = None
    quantity: int | None = None
    category: str | None = None

    def validate(self) -> None:
        if self.part_number is not None:
            _validate_text(self.part_number, "partNumber", "Part number", MAX_PART_NUMBER_LENGTH)
        if self.name is not None:
            _validate_text(self.name, "name", "Part name", MAX_NAME_LENGTH)
        if self.category is not None:
            _validate_text(self.category, "category", "Category")
        if self.price is not None:
            _validate_price(self.price)
        if self.quantity is not None:
            _validate_quantity(self.quantity)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.part_number is not None:
            payload["partNumber"] = self.part_number
        if self.name is not None:
            payload["name"] = self.name
        if self.description is not None:
            payload["description"] = self.description
        if self.price is not None:
            payload["price"] = round_price(self.price)
        if self.quantity is not None:
            payload["quantity"] = self.quantity
        if self.category is not None:
            payload["category"] = self.category
        return payload


# Query parameter order on the wire
SEARCH_FIELDS = (
    ("name", "name"),
    ("part_number", "partNumber"),
    ("category", "category"),
    ("status", "status"),
    ("min_price", "minPrice"),
    ("max_price", "maxPrice"),
    ("in_stock", "inStock"),
    ("page", "page"),
    ("limit", "limit"),
)


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class SearchPartsDTO:
    name: str | None = None
    part_number: str | None = None
    category: str | None = None
    status: PartStatus | str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock: bool | None = None
    page: int | None = None
    limit: int | None = None

    def validate(self) -> None:
        for attr, wire_name in (("page", "page"), ("limit", "limit")):
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValidationError(
                    f"{wire_name} must be a positive integer", field=wire_name, code="invalid"
                )
        if self.min_price is not None:
            _validate_price(self.min_price, "minPrice")
        if self.max_price is not None:
            _validate_price(self.max_price, "maxPrice")
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValidationError(
                "minPrice cannot be greater than maxPrice", field="minPrice", code="invalid_range"
            )

    def to_query_params(self) -> list[tuple[str, str]]:
        """Query pairs for the fields that are set, in wire order."""
        return [
            (wire_name, _format_query_value(getattr(self, attr)))
            for attr, wire_name in SEARCH_FIELDS
            if getattr(self, attr) is not None
        ]


@dataclass
class SearchPartsResponseDTO:
    parts: list[PartDTO] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchPartsResponseDTO":
        return cls(
            parts=[PartDTO.from_dict(item) for item in data.get("parts", [])],
            total=data.get("total", 0),
            page=data.get("page", 1),
            limit=data.get("limit", 10),
            total_pages=data.get("totalPages", 0),
        )
