"""ServiceResult and ServiceError — the service contract.

INVARIANT: Every operation a UI collaborator calls returns ServiceResult.
The CLI, the shell, and the MCP adapter all consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from layoutctl.domain.errors import LayoutError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: LayoutError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"request_drop"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: LayoutError) -> ServiceResult:
        """Failed result carrying *exc* as its structured error."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
