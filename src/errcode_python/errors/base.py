"""
Base error classes for errcode-python.

These are failures of the library itself (bad code text, out-of-range
values), as opposed to the GeneralError values that users build and raise:
- ErrcodeError: Base class for all library errors
- CodeFormatError: Code text outside the base-36 alphabet
- CodeRangeError: Integer outside the 32-bit unsigned range
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic value (e.g., 'code[3]')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'codec')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class ErrcodeError(Exception):
    """Base class for all errcode-python errors.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> ErrcodeError:
        """Add a hint to this error."""
        self.context.hint = hint
        return self


class CodeFormatError(ErrcodeError, ValueError):
    """Code text contains a character outside ``0-9A-Z``."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        code: str | None = None,
        position: int | None = None,
    ) -> None:
        ctx = context or ErrorContext(
            source="codec",
            hint="Codes use upper-case base-36 digits 0-9A-Z",
        )
        if position is not None:
            ctx.field_path = f"code[{position}]"
        if code is not None:
            ctx.details["code"] = code
        super().__init__(message, ctx)
        self.code = code
        self.position = position


class CodeRangeError(ErrcodeError, ValueError):
    """Integer does not fit in a 32-bit unsigned code."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        value: int | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="codec")
        if value is not None:
            ctx.details["value"] = value
        super().__init__(message, ctx)
        self.value = value
