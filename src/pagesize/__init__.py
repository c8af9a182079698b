"""pagesize: immutable page sizes and standard paper presets for print output."""

from pagesize.domain.page_size import ANSI_TABLOID, ISO_A4, US_LEGAL, US_LETTER, PageSize
from pagesize.domain.presets import PRESETS, PagePreset, UnknownPresetError, get_preset

__version__ = "0.1.0"

__all__ = [
    "ANSI_TABLOID",
    "ISO_A4",
    "PRESETS",
    "US_LEGAL",
    "US_LETTER",
    "PagePreset",
    "PageSize",
    "UnknownPresetError",
    "__version__",
    "get_preset",
]
