"""Named page size presets and lookup by name.

Preset names are matched loosely: case, surrounding whitespace, and
``-``/space separators are folded so ``"US-Letter"`` finds ``us_letter``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from enum import StrEnum
from types import MappingProxyType

from pagesize.domain.page_size import ANSI_TABLOID, ISO_A4, US_LEGAL, US_LETTER, PageSize

_SEPARATOR_PATTERN = re.compile(r"[\s\-]+")


class PagePreset(StrEnum):
    """Built-in standard paper sizes."""

    ISO_A4 = "iso_a4"
    US_LEGAL = "us_legal"
    ANSI_TABLOID = "ansi_tabloid"
    US_LETTER = "us_letter"


PRESETS: Mapping[PagePreset, PageSize] = MappingProxyType(
    {
        PagePreset.ISO_A4: ISO_A4,
        PagePreset.US_LEGAL: US_LEGAL,
        PagePreset.ANSI_TABLOID: ANSI_TABLOID,
        PagePreset.US_LETTER: US_LETTER,
    }
)


class UnknownPresetError(LookupError):
    """Raised when a preset name matches no known page size."""

    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = sorted(known)
        super().__init__(f"Unknown page size preset: {name!r}")


def normalize_preset_name(name: str) -> str:
    """Lowercase, trim, and fold ``-``/whitespace runs to ``_``."""
    return _SEPARATOR_PATTERN.sub("_", name.strip().lower())


def get_preset(name: str) -> PageSize:
    """Return the built-in PageSize registered under *name*."""
    key = normalize_preset_name(name)
    try:
        return PRESETS[PagePreset(key)]
    except ValueError:
        raise UnknownPresetError(name, (str(p) for p in PagePreset)) from None
