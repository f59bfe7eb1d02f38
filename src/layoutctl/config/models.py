"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, layoutctl.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, NonNegativeInt

from layoutctl.domain.markup import DEFAULT_PLACEHOLDER


class ExportConfig(BaseModel):
    """[export] section."""

    model_config = {"frozen": True}

    placeholder: str = DEFAULT_PLACEHOLDER
    indent: NonNegativeInt = 2
    title: str = "Layout"
    stylesheet: str = ""


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: str = "stdio"


class LayoutConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    export: ExportConfig = Field(default_factory=ExportConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)
