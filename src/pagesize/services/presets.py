"""PresetService: list, resolve and build page sizes for the CLI.

Built-in names resolve through ``get_preset``; custom presets from
``[presets.custom]`` are consulted only when that lookup fails. Custom names
are normalized like built-in names, and a custom entry can never replace a
built-in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from pagesize.domain.page_size import PageSize
from pagesize.domain.presets import PRESETS, UnknownPresetError, get_preset, normalize_preset_name
from pagesize.services.result import ServiceResult

if TYPE_CHECKING:
    from pagesize.config.settings import PageSizeSettings

logger = logging.getLogger(__name__)


def _payload(name: str, page_size: PageSize) -> dict[str, Any]:
    return {"name": name, **page_size.to_map(), "display": str(page_size)}


class PresetService:
    """Preset lookups against the configured catalog."""

    def __init__(self, settings: PageSizeSettings) -> None:
        self._settings = settings

    def _custom_presets(self, warnings: list[str]) -> dict[str, PageSize]:
        builtin = {str(name) for name in PRESETS}
        custom: dict[str, PageSize] = {}
        for raw_name, entry in self._settings.presets.custom.items():
            name = normalize_preset_name(raw_name)
            if name in builtin or name in custom:
                warnings.append(f"Custom preset '{raw_name}' duplicates '{name}' and was ignored")
                continue
            custom[name] = entry.to_page_size()
        return custom

    def _lookup(self, name: str, custom: dict[str, PageSize]) -> PageSize:
        try:
            return get_preset(name)
        except UnknownPresetError as exc:
            found = custom.get(normalize_preset_name(name))
            if found is None:
                raise UnknownPresetError(name, [*exc.known, *custom]) from None
            return found

    def list_presets(self) -> ServiceResult:
        """List every preset, built-ins first."""
        warnings: list[str] = []
        catalog = {str(name): size for name, size in PRESETS.items()}
        catalog.update(self._custom_presets(warnings))
        default = normalize_preset_name(self._settings.presets.default)
        if default not in catalog:
            warnings.append(f"Default preset '{self._settings.presets.default}' is not a known preset")
        presets = [{"name": name, **size.to_map()} for name, size in catalog.items()]
        logger.debug("Listed %d presets", len(presets))
        return ServiceResult.success(
            "list_presets",
            {"presets": presets, "default": default},
            warnings,
        )

    def resolve(self, name: str | None = None) -> ServiceResult:
        """Resolve *name* (or the configured default) to a page size."""
        warnings: list[str] = []
        custom = self._custom_presets(warnings)
        requested = name if name is not None else self._settings.presets.default
        try:
            found = self._lookup(requested, custom)
        except UnknownPresetError as exc:
            logger.debug("Unknown preset %r", requested)
            return ServiceResult.failure(
                "show_preset",
                "UNKNOWN_PRESET",
                str(exc),
                detail={"known": exc.known},
                warnings=warnings,
            )
        key = normalize_preset_name(requested)
        page_size = PageSize.set_page_size(found)
        logger.debug("Resolved preset %s to %s", key, page_size)
        return ServiceResult.success("show_preset", _payload(key, page_size), warnings)

    def custom(self, height: float, width: float) -> ServiceResult:
        """Build an ad-hoc page size from explicit dimensions."""
        try:
            page_size = PageSize(height, width)
        except ValidationError as exc:
            return ServiceResult.failure(
                "custom_size",
                "INVALID_PAGE_SIZE",
                "Height and width must be numbers",
                detail={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
            )
        logger.debug("Built custom page size %s", page_size)
        return ServiceResult.success("custom_size", _payload("custom", page_size))
