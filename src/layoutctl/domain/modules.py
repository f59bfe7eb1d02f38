"""Module templates and the static catalog.

A module is a named row/column split. The catalog order is stable: it is the
order a picker shows and the order ``layoutctl modules`` prints.

The header/content/footer preset is structurally a 1x3 split; it differs from
the plain ``1x3`` preset only by key and label.
"""

from __future__ import annotations

from pydantic import BaseModel, PositiveInt

from layoutctl.domain.errors import UnknownModuleError


class ModuleType(BaseModel):
    """Immutable split template."""

    model_config = {"frozen": True}

    key: str
    label: str
    rows: PositiveInt
    cols: PositiveInt

    @property
    def cells(self) -> int:
        """Number of children a split with this module creates."""
        return self.rows * self.cols


MODULE_CATALOG: tuple[ModuleType, ...] = (
    ModuleType(key="2x1", label="Double Column", rows=2, cols=1),
    ModuleType(key="1x2", label="Double Row", rows=1, cols=2),
    ModuleType(key="2x2", label="Grid 2x2", rows=2, cols=2),
    ModuleType(key="3x1", label="Triple Column", rows=3, cols=1),
    ModuleType(key="1x3", label="Triple Row", rows=1, cols=3),
    ModuleType(key="header-content-footer", label="Header / Content / Footer", rows=1, cols=3),
)

_BY_KEY: dict[str, ModuleType] = {m.key: m for m in MODULE_CATALOG}


def list_modules() -> tuple[ModuleType, ...]:
    """Return every preset in catalog order."""
    return MODULE_CATALOG


def find_module(key: str) -> ModuleType:
    """Look up a preset by key (case-insensitive, surrounding space ignored).

    Raises:
        UnknownModuleError: *key* names no preset.
    """
    module = _BY_KEY.get(key.strip().lower())
    if module is None:
        raise UnknownModuleError(
            f"Unknown module '{key}'",
            module=key,
            known=sorted(_BY_KEY),
        )
    return module


def is_cataloged(module: ModuleType) -> bool:
    """Whether *module* is one of the catalog presets (by value)."""
    return _BY_KEY.get(module.key) == module
