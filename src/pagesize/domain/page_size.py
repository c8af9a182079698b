"""PageSize: physical page dimensions for print output.

Heights and widths are centimeters. Values are stored verbatim: no range
checks are applied, so validation of magnitudes is left to whatever
consumes the size (typically a printing backend).

INVARIANT: A PageSize never changes after construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

# Reference for the preset dimensions:
# https://www.agooddaytoprint.com/page/paper-size-chart-faq
_ISO_A4_HEIGHT = 29.7
_ISO_A4_WIDTH = 21.0

_MAP_KEYS = ("height", "width")


class PageSize(BaseModel):
    """Immutable page height and width in centimeters.

    ``PageSize()`` is ISO A4. ``PageSize(height, width)`` accepts the two
    dimensions positionally or by keyword. Only real numbers are accepted:
    numeric strings and bools are rejected, ints are widened to float.
    """

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}

    height: float = _ISO_A4_HEIGHT
    width: float = _ISO_A4_WIDTH

    def __init__(self, height: float = _ISO_A4_HEIGHT, width: float = _ISO_A4_WIDTH) -> None:
        super().__init__(height=height, width=width)

    @staticmethod
    def set_page_size(page_size: PageSize | None) -> PageSize:
        """Return a new PageSize with the same dimensions as *page_size*.

        Raises:
            ValueError: If *page_size* is None.
        """
        if page_size is None:
            raise ValueError("Page size cannot be null")
        return PageSize(page_size.height, page_size.width)

    @classmethod
    def from_map(cls, mapping: Mapping[str, Any]) -> PageSize:
        """Build a PageSize from a ``{"height": ..., "width": ...}`` mapping.

        Inverse of :meth:`to_map`. Extra keys are ignored.
        """
        missing = [key for key in _MAP_KEYS if key not in mapping]
        if missing:
            msg = f"Page size mapping is missing: {', '.join(missing)}"
            raise ValueError(msg)
        return cls.model_validate({key: mapping[key] for key in _MAP_KEYS})

    def to_map(self) -> dict[str, Any]:
        """Return a fresh ``{"height": ..., "width": ...}`` dict for request payloads."""
        return {"height": self.height, "width": self.width}

    def __str__(self) -> str:
        return f"PageSize[width={self.width}, height={self.height}]"


ISO_A4 = PageSize(_ISO_A4_HEIGHT, _ISO_A4_WIDTH)
US_LEGAL = PageSize(35.56, 21.59)
ANSI_TABLOID = PageSize(43.18, 27.94)
US_LETTER = PageSize(27.94, 21.59)
