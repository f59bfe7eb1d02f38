"""BaseService — foundation for services that work on an EditorSession.

Every service receives the session at construction time and reads the tree
and settings through it. Structural changes still go through the session's
own methods.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from layoutctl.services.session import EditorSession


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ExportService(BaseService):
            def export(self, ...) -> ServiceResult:
                markup = self._session.export_markup()
                ...
    """

    def __init__(self, session: EditorSession) -> None:
        self._session = session

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a lifecycle hook through the session's plugin manager."""
        self._session.dispatch(hook_name, payload, warnings)
