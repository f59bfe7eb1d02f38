"""Layout error taxonomy.

Every error is local and recoverable: the session converts it into a failed
ServiceResult and carries on. Violated structural invariants are assertions,
not members of this hierarchy.
"""

from __future__ import annotations

from typing import Any, ClassVar


class LayoutError(Exception):
    """Base class for recoverable layout errors.

    Attributes:
        code: Stable machine-readable code, copied into ``ServiceError.code``.
        detail: Extra context for the failed result (paths, keys, ...).
    """

    code: ClassVar[str] = "LAYOUT_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidStateError(LayoutError):
    """Leaf-only state (text content) accessed on a container."""

    code = "INVALID_STATE"


class InvalidOperationError(LayoutError):
    """Split attempted on a node that is not a leaf."""

    code = "INVALID_OPERATION"


class RejectedDropError(LayoutError):
    """A drop declined at drop time. Not a defect."""

    code = "REJECTED_DROP"


class UnknownModuleError(LayoutError):
    """Module key or value that is not one of the catalog presets."""

    code = "UNKNOWN_MODULE"


class NodeNotFoundError(LayoutError):
    """Cell path that does not resolve to a node."""

    code = "NODE_NOT_FOUND"
