"""Single-writer gate around the server's editing session.

The core never locks. MCP requests can arrive concurrently, so every tool
and resource handler runs its session calls inside :meth:`SessionGate.locked`.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layoutctl.services.session import EditorSession


class SessionGate:
    """Serializes access to one EditorSession."""

    def __init__(self, session: EditorSession) -> None:
        self._session = session
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[EditorSession]:
        with self._lock:
            yield self._session
