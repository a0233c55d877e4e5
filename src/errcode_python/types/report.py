"""
Serializable error reports.

An ErrorReport is the shape in which an error node is embedded in API
responses or structured logs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from errcode_python.codes.base36 import is_valid_code


class ErrorReport(BaseModel):
    """Snapshot of an error node."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Accumulated base-36 error code")
    code_note: str = Field(description="Derivation trace of the code")
    message: str = Field(description="Display message")
    rendered: str = Field(description="Full rendered error string")
    external_cause: str | None = Field(
        default=None,
        description="Text of an attached foreign cause, if any",
    )

    @property
    def has_valid_code(self) -> bool:
        """Whether ``code`` only uses the base-36 alphabet."""
        return is_valid_code(self.code)

    def to_response(self) -> dict[str, Any]:
        """Convert to a response payload, omitting unset fields."""
        return self.model_dump(exclude_none=True)
