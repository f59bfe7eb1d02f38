"""CatalogService — the module picker's view of the catalog."""

from __future__ import annotations

from layoutctl.domain.errors import LayoutError
from layoutctl.domain.modules import find_module, list_modules
from layoutctl.services.base import BaseService
from layoutctl.services.result import ServiceResult


class CatalogService(BaseService):
    """Lists and looks up module presets."""

    def list_modules(self) -> ServiceResult:
        items = [
            {
                "key": m.key,
                "label": m.label,
                "rows": m.rows,
                "cols": m.cols,
                "cells": m.cells,
            }
            for m in list_modules()
        ]
        return ServiceResult(ok=True, op="list_modules", data={"count": len(items), "items": items})

    def get_module(self, key: str) -> ServiceResult:
        try:
            module = find_module(key)
        except LayoutError as exc:
            return ServiceResult.failure("get_module", exc)
        return ServiceResult(
            ok=True,
            op="get_module",
            data={**module.model_dump(), "cells": module.cells},
        )
