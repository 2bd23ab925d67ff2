"""RFC 7807 Problem Details models."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from parts_sdk.transport.base import HttpResponse

STANDARD_FIELDS = frozenset({"type", "title", "status", "detail", "instance"})


@dataclass
class ProblemDetail:
    """RFC 7807 Problem Details object.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str | None = None  # URI reference identifying the problem type
    title: str | None = None  # Short, human-readable summary
    status: int | None = None  # HTTP status code
    detail: str | None = None  # Human-readable explanation
    instance: str | None = None  # URI reference identifying specific occurrence

    # Extension members (additional fields from API)
    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: "HttpResponse") -> "ProblemDetail | None":
        """Parse RFC 7807 problem details from a decoded response.

        Args:
            response: Response descriptor whose body has already been decoded

        Returns:
            ProblemDetail object or None if not RFC 7807 format
        """
        data = response.body
        if not isinstance(data, dict):
            return None

        # Without the dedicated content type, require at least one standard field
        if "application/problem+json" not in response.content_type:
            if not any(field in data for field in STANDARD_FIELDS):
                return None

        extensions = {k: v for k, v in data.items() if k not in STANDARD_FIELDS}

        return cls(
            type=data.get("type"),
            title=data.get("title"),
            status=data.get("status"),
            detail=data.get("detail"),
            instance=data.get("instance"),
            extensions=extensions if extensions else None,
        )

    def to_exception_message(self) -> str:
        """Convert problem details to exception message."""
        lines = []

        if self.title:
            lines.append(self.title)
        elif self.detail:
            lines.append(self.detail)

        if self.title and self.detail and self.title != self.detail:
            lines.append(self.detail)

        if self.type:
            lines.append(f"Problem Type: {self.type}")

        if self.instance:
            lines.append(f"Instance: {self.instance}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
