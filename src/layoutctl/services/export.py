"""ExportService — markup fragments, standalone documents, and files.

Extends BaseService. Exporting never mutates the tree.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from markupsafe import Markup

from layoutctl.infrastructure.templates import build_template_environment
from layoutctl.services.base import BaseService
from layoutctl.services.result import ServiceError, ServiceResult

DOCUMENT_TEMPLATE = "document.html.j2"

logger = logging.getLogger(__name__)


def render_document(
    markup: str,
    *,
    title: str,
    stylesheet: str = "",
    project_root: Path | None = None,
) -> str:
    """Wrap a markup fragment in a standalone HTML page.

    A ``document.html.j2`` under ``.layoutctl/templates/export/`` in
    *project_root* replaces the packaged template. The fragment and the
    stylesheet are inserted verbatim; the title is escaped.
    """
    env = build_template_environment("export", project_root=project_root)
    template = env.get_template(DOCUMENT_TEMPLATE)
    return template.render(title=title, stylesheet=Markup(stylesheet), markup=Markup(markup))


class ExportService(BaseService):
    """Export the session's layout."""

    def export(self, *, document: bool = False, output: Path | None = None) -> ServiceResult:
        """Render the current tree, optionally as a full page and/or to a file.

        Args:
            document: Wrap the fragment with :func:`render_document`.
            output: Write the markup to this file (parents are created). A
                target that cannot be written yields a ``WRITE_FAILED`` result.
        """
        op = "export_markup"
        settings = self._session.settings
        markup = self._session.export_markup()
        if document:
            markup = render_document(
                markup,
                title=settings.export.title,
                stylesheet=settings.export.stylesheet,
                project_root=settings.project_root,
            )

        payload: dict[str, Any] = {
            "markup": markup,
            "document": document,
            "length": len(markup),
        }
        if output is not None:
            output = output.resolve()
            text = markup if markup.endswith("\n") else markup + "\n"
            try:
                output.parent.mkdir(parents=True, exist_ok=True)
                output.write_text(text, encoding="utf-8")
            except OSError as exc:
                logger.debug("Export to %s failed: %s", output, exc)
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="WRITE_FAILED",
                        message=f"Cannot write {output}: {exc.strerror or exc}",
                        detail={"output": str(output)},
                    ),
                )
            payload["output"] = str(output)
            logger.debug("Wrote %d characters to %s", len(text), output)

        warnings: list[str] = []
        self._dispatch_event(
            "post_export",
            {"markup": markup, "document": document, "output": payload.get("output")},
            warnings,
        )
        return ServiceResult(ok=True, op=op, data=payload, warnings=warnings)
