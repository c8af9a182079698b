"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pagesize.toml only contains overrides.
PageSizeSettings composes these sections; see config/settings.py.
An empty (or missing) file yields the built-in presets with ISO A4 as default.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pagesize.domain.page_size import PageSize


class PageSizeConfig(BaseModel):
    """One entry of the [presets.custom] table, in centimeters."""

    model_config = {"frozen": True}

    height: float
    width: float

    def to_page_size(self) -> PageSize:
        return PageSize(self.height, self.width)


class PresetsConfig(BaseModel):
    """[presets] section.

    ``custom`` maps user-defined preset names to dimensions::

        [presets.custom.postcard]
        height = 14.8
        width = 10.5
    """

    model_config = {"frozen": True}

    default: str = "iso_a4"
    custom: dict[str, PageSizeConfig] = Field(default_factory=dict)
